"""
# Collection and execution of the test functions of a module without pytest.

# Each test module ends with a `__main__` block calling &execute, so a single
# module can be run with `python -m ticktime.test.test_types`. The first
# negative &core.Fate is raised, carrying the failed contention as its cause.
"""
from . import core

def get_test_index(tester, int=int):
	"""
	# Returns the first line number of the underlying code object.
	"""
	try:
		return int(tester.__test_order__)
	except AttributeError:
		pass

	# Resolve the innermost function.
	visited = set((tester,))
	while '__wrapped__' in tester.__dict__:
		tester = tester.__wrapped__
		if tester in visited:
			return None
		visited.add(tester)

	try:
		return int(tester.__code__.co_firstlineno)
	except AttributeError:
		return None

def gather(container, prefix='test_'):
	"""
	# Returns the attribute names of &container that start with &prefix in
	# the order that their functions were defined.
	"""
	tests = [name for name in dir(container) if name.startswith(prefix)]
	tests.sort() # Order by name first.
	tests.sort(key=(lambda x: get_test_index(getattr(container, x)) or 0))
	return tests

def execute(module):
	"""
	# Resolve the fate of the tests contained in &module. No status information
	# is printed and the fate of the first failure will be raised.
	"""
	for id in gather(module):
		test = core.Test(id, getattr(module, id))
		with test.exits:
			test.seal()
		if test.fate.negative:
			raise test.fate
