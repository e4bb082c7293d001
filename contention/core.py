"""
# Test primitives. Provides and defines &Test, &Contention, &Absurdity, and &Fate.
"""
import builtins
import operator
import functools
import contextlib

class Absurdity(Exception):
	"""
	# Exception raised by &Contention instances designating a failed assertion.
	"""

	# for re-constituting the expression
	operator_names_mapping = {
		'__eq__': '==',
		'__ne__': '!=',
		'__lt__': '<',
		'__gt__': '>',
		'__le__': '<=',
		'__ge__': '>=',
		'__mod__': 'is',
	}

	def __init__(self, operator, former, latter, inverse=None):
		self.operator = operator
		self.former = former
		self.latter = latter
		self.inverse = inverse
		super().__init__(operator, former, latter)

	def __str__(self):
		opchars = self.operator_names_mapping.get(self.operator, self.operator)
		prefix = ('not ' if self.inverse else '')
		return prefix + ' '.join((repr(self.former), opchars, repr(self.latter)))

class Contention(object):
	"""
	# Contentions are made by the true division operator of &Test instances
	# and perform the comparison named by the operator applied to them.

	#!python
		def test_epoch(test):
			test/Time(0) == Time.epoch
			test/Time(1) > Time.epoch

	# Used as a context manager, the contention traps the exception class
	# it was made from:

	#!python
		with test/RangeError as exc:
			check(Time.max + Span(1))
		test/exc().ticks == int(Time.max) + 1
	"""
	__slots__ = ('test', 'object', 'storage', 'inverse')

	def __init__(self, test, object, inverse=False):
		self.test = test
		self.object = object
		self.inverse = inverse

	# Build comparison methods from the operator module.
	_override = {
		'__mod__' : ('__mod__', lambda x,y: x is y)
	}

	for k in ('__eq__', '__ne__', '__lt__', '__gt__', '__le__', '__ge__', '__mod__'):
		opname, v = _override.get(k, (k, getattr(operator, k)))

		def check(self, ob, opname=opname, operator=v):
			x, y = self.object, ob
			if bool(operator(x, y)) == bool(self.inverse):
				raise self.test.Absurdity(opname, x, y, inverse=self.inverse)
		locals()[k] = check
	del k, opname, v, check

	__hash__ = None

	def __enter__(self, partial=functools.partial):
		return partial(getattr, self, 'storage', None)

	def __exit__(self, typ, val, tb):
		self.storage = val
		if isinstance(val, self.test.Fate):
			# Fates pass through.
			return

		if not isinstance(val, self.object):
			raise self.test.Absurdity("isinstance", self.object, val)
		return True

	def __xor__(self, subject):
		"""
		# Contend that the &subject raises the given exception when it is called:

		#!python
			test/TypeError ^ (lambda: Time(0) + Time(0))
		"""
		with self as exc:
			subject()
		return exc()
	__rxor__ = __xor__

class Fate(BaseException):
	"""
	# The conclusion of a test. &Test.seal assigns one to &Test.fate.
	"""
	descriptors = {
		# Abstract, Impact
		'return': ("passed", 1),
		'pass': ("passed", 1),
		'skip': ("skipped", 0),
		'fail': ("failed", -1),
		'interrupt': ("interrupted", -1),
	}

	line = None

	def __init__(self, content, subtype='fail'):
		self.content = content
		self.subtype = subtype
		super().__init__(content)

	@property
	def impact(self):
		return self.descriptors[self.subtype][1]

	@property
	def negative(self):
		"""
		# Whether the fate's effect should be considered undesirable.
		"""
		return self.impact < 0

class Test(object):
	"""
	# An individual test and the interfaces used by its subject to make contentions.

	# [ Properties ]

	# /identifier/
		# The name of the test function within its module.
	# /subject/
		# The callable that performs a series of checks using the &Test instance.
	# /fate/
		# The conclusion of the Test. An instance of &Fate.
	# /exits/
		# A &contextlib.ExitStack for cleaning up allocations made during the test.
	"""
	__slots__ = ('subject', 'identifier', 'fate', 'exits',)

	Absurdity = Absurdity
	Contention = Contention
	Fate = Fate

	def __init__(self, identifier, subject, ExitStack=contextlib.ExitStack):
		self.identifier = identifier
		self.subject = subject
		self.exits = ExitStack()

	def __truediv__(self, object):
		return self.Contention(self, object)

	def __rtruediv__(self, object):
		return self.Contention(self, object)

	def __floordiv__(self, object):
		return self.Contention(self, object, True)

	def __rfloordiv__(self, object):
		return self.Contention(self, object, True)

	def isinstance(self, *args):
		if not builtins.isinstance(*args):
			raise self.Absurdity("isinstance", *args, inverse=True)

	def issubclass(self, *args):
		if not builtins.issubclass(*args):
			raise self.Absurdity("issubclass", *args, inverse=True)

	def skip(self, condition):
		"""
		# Skip the test given that the provided &condition is &True.
		"""
		if condition:
			raise self.Fate(condition, subtype='skip')

	def fail(self, cause):
		raise self.Fate(cause, subtype='fail')

	def seal(self):
		"""
		# Execute the subject with the Test instance as the only parameter and
		# assign the resulting &Fate to &fate.
		"""
		if hasattr(self, 'fate'):
			raise RuntimeError("test has already been sealed")

		tb = None
		try:
			r = self.subject(self)
			self.fate = self.Fate(r, subtype='return')
		except self.Fate as err:
			tb = err.__traceback__.tb_next
			self.fate = err
		except Exception as err:
			tb = err.__traceback__.tb_next
			self.fate = self.Fate('test raised exception', subtype='fail')
			self.fate.__cause__ = err
		except BaseException as err:
			self.fate = self.Fate('test raised interrupt', subtype='interrupt')
			self.fate.__cause__ = err
			raise

		if tb is not None:
			self.fate.line = tb.tb_lineno
