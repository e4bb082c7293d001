"""
# Integer mechanics shared by the tick based types.

# Python's integer division floors its quotient. Field extraction for points
# before the epoch depends on the quotient being truncated toward zero, so
# the types here use &quotient and &remainder rather than the `//` and `%`
# operators.
"""

def quotient(numerator:int, denominator:int) -> int:
	"""
	# Divide &numerator by &denominator rounding the result toward zero.

	#!python
		assert quotient(-1, 10) == 0
		assert quotient(-11, 10) == -1
	"""
	q = abs(numerator) // abs(denominator)
	if (numerator < 0) != (denominator < 0):
		return -q
	return q

def remainder(numerator:int, denominator:int) -> int:
	"""
	# The remainder corresponding to &quotient; its sign is the sign of the &numerator.

	#!python
		assert remainder(-11, 10) == -1
		assert remainder(11, -10) == 1
	"""
	return numerator - (quotient(numerator, denominator) * denominator)

class RangeError(ValueError):
	"""
	# Raised when a tick count falls outside of the boundaries required by an operation.

	# [ Properties ]

	# /ticks/
		# The offending tick count.
	# /minimum/
		# The lowest accepted tick count, inclusive.
	# /maximum/
		# The highest accepted tick count, inclusive.
	"""

	def __init__(self, ticks, minimum, maximum):
		self.ticks = ticks
		self.minimum = minimum
		self.maximum = maximum
		super().__init__(ticks, minimum, maximum)

	def __str__(self):
		return "tick count {0} is outside of the range [{1}, {2}]".format(
			self.ticks, self.minimum, self.maximum
		)

class Unit(int):
	"""
	# The base class of &.types.Span and &.types.Time.

	# Instances are integers counting ticks. Comparisons and hashing are
	# the integer's, so instances of either type with equal tick counts
	# compare equal.
	"""
	__slots__ = ()

	@property
	def ticks(self) -> int:
		"""
		# The tick count as a plain &int.
		"""
		return int(self)

	def compare(self, other) -> int:
		"""
		# Three-way comparison of the tick counts: `-1`, `0`, or `1`.
		"""
		x = int(self)
		y = int(other)
		if x < y:
			return -1
		if x > y:
			return 1
		return 0

	def __repr__(self):
		return "{0}({1})".format(self.__class__.__name__, int(self))

	def __str__(self):
		return repr(self)
