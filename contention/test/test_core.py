import types
from .. import core as module
from .. import engine

def test_contention_operators(test):
	t = module.Test('subject', None)
	(t/1) == 1
	(t/1) != 2
	(t/1) < 2
	(t/2) > 1
	(t/1) <= 1
	(t/1) >= 1
	(t//1) == 2

	with test/module.Absurdity as exc:
		(t/1) == 2
	test/exc().operator == '__eq__'
	test/str(exc()) == "1 == 2"

	with test/module.Absurdity as exc:
		(t//1) == 1
	test/str(exc()) == "not 1 == 1"

def test_contention_identity(test):
	t = module.Test('subject', None)
	marker = object()
	(t/marker) % marker

	with test/module.Absurdity as exc:
		(t/marker) % object()
	test/exc().operator == '__mod__'

def test_trap(test):
	t = module.Test('subject', None)
	with t/ValueError as exc:
		raise ValueError("trapped")
	test/str(exc()) == "trapped"

	# Absence of the exception is an absurdity.
	with test/module.Absurdity as exc:
		with t/ValueError:
			pass

	test.isinstance(t/KeyError ^ (lambda: {}['missing']), KeyError)

def test_seal(test):
	def passing(t):
		t/1 == 1
	def failing(t):
		t/1 == 2
	def skipping(t):
		t.skip(True)

	p = module.Test('passing', passing)
	p.seal()
	test/p.fate.subtype == 'return'
	test/p.fate.negative == False

	f = module.Test('failing', failing)
	f.seal()
	test/f.fate.subtype == 'fail'
	test/f.fate.negative == True
	test.isinstance(f.fate.__cause__, module.Absurdity)
	test/f.fate.line == failing.__code__.co_firstlineno + 1

	s = module.Test('skipping', skipping)
	s.seal()
	test/s.fate.subtype == 'skip'
	test/s.fate.negative == False

	test/RuntimeError ^ p.seal

def test_skip_condition(test):
	# A false condition does not conclude the test.
	test.skip(False)
	test.skip(None)

	t = module.Test('subject', None)
	try:
		t.skip("unavailable")
	except module.Fate as fate:
		test/fate.subtype == 'skip'
		test/fate.content == "unavailable"
	else:
		test.fail("skip did not raise a fate")

def test_plugin_fate_resolution(test):
	import pytest
	from .. import plugin

	with test/pytest.skip.Exception as exc:
		plugin.resolve_fate(module.Fate("unavailable", subtype='skip'))
	test/exc().msg == "unavailable"

	# Other fates propagate as failures.
	failure = module.Fate("broken", subtype='fail')
	try:
		plugin.resolve_fate(failure)
	except module.Fate as fate:
		(test/fate) % failure
	else:
		test.fail("fail fate was not propagated")

def test_gather_execute(test):
	m = types.ModuleType('sample')
	calls = []
	def test_second(t):
		calls.append('second')
	def test_first(t):
		calls.append('first')
	test_first.__test_order__ = 1
	test_second.__test_order__ = 2
	m.test_second = test_second
	m.test_first = test_first
	m.helper = None

	test/engine.gather(m) == ['test_first', 'test_second']
	engine.execute(m)
	test/calls == ['first', 'second']

	def test_failure(t):
		t/1 == 2
	m.test_failure = test_failure
	test_failure.__test_order__ = 3
	# Fates pass through contentions.
	try:
		engine.execute(m)
	except module.Fate as fate:
		test/fate.subtype == 'fail'
	else:
		test.fail("failing test did not raise its fate")

if __name__ == '__main__':
	import sys
	engine.execute(sys.modules[__name__])
