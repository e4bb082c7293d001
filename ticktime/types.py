"""
# Tick based classes for points in time and measures of time.

#!python
	start = types.Time(0)
	two_hours = types.Span.of(hour=2)

	# # Time addition.
	later = start + two_hours

	# # Type aware comparisons.
	assert start.leads(later) == True
	assert start.follows(later) == False
	assert later - start == two_hours

# [ Elements ]

# /Span/
	# The signed measure of ticks; the duration between two points.
# /Time/
	# The point in time expressed as ticks since midnight, January 1, 0001.
"""
from . import abstract
from . import core
from . import units

__all__ = ['Span', 'Time', 'RangeError']

RangeError = core.RangeError
_quotient = core.quotient
_remainder = core.remainder

class Span(core.Unit):
	"""
	# A signed number of ticks.

	# Totals, &days, &hours, &seconds, and so on, are truncated toward zero.
	"""
	__slots__ = ()

	NanosecondsPerTick = units.nanoseconds_in_tick
	TicksPerMicrosecond = units.ticks_in_microsecond
	TicksPerMillisecond = units.ticks_in_millisecond
	TicksPerSecond = units.ticks_in_second
	TicksPerMinute = units.ticks_in_minute
	TicksPerHour = units.ticks_in_hour
	TicksPerDay = units.ticks_in_day

	DaysPerYear = units.days_in_year
	DaysPer4Years = units.days_in_four_years
	DaysPer100Years = units.days_in_century
	DaysPer400Years = units.days_in_cycle

	@classmethod
	def of(Class, *spans, **parts):
		"""
		# Create an instance from the sum of the given &spans and &parts.

		#!python
			s = Span.of(hour=33, microsecond=44)

		# [ Parameters ]
		# /spans/
			# Existing &Span instances to include in the sum.
		# /parts/
			# Keyword names designate the unit of the corresponding value.
			# `nanosecond` is accepted and truncated toward zero to ticks.
		"""
		total = sum(int(x) for x in spans)
		ns = parts.pop('nanosecond', 0)

		for unit, value in parts.items():
			try:
				total += value * units.unit_ticks[unit]
			except KeyError:
				raise TypeError("unknown unit " + repr(unit)) from None

		if ns:
			total += _quotient(ns, units.nanoseconds_in_tick)
		return Class(total)

	@classmethod
	def from_nanoseconds(Class, value:int):
		return Class(_quotient(value, units.nanoseconds_in_tick))

	@classmethod
	def from_microseconds(Class, value:int):
		return Class(value * units.ticks_in_microsecond)

	@classmethod
	def from_milliseconds(Class, value:int):
		return Class(value * units.ticks_in_millisecond)

	@classmethod
	def from_seconds(Class, value:int):
		return Class(value * units.ticks_in_second)

	@classmethod
	def from_minutes(Class, value:int):
		return Class(value * units.ticks_in_minute)

	@classmethod
	def from_hours(Class, value:int):
		return Class(value * units.ticks_in_hour)

	@classmethod
	def from_days(Class, value:int):
		return Class(value * units.ticks_in_day)

	@classmethod
	def from_interval(Class, seconds:float):
		"""
		# Create an instance from a floating point number of seconds rounded to
		# the nearest tick.
		"""
		return Class(round(seconds * units.ticks_in_second))

	@property
	def nanoseconds(self) -> int:
		return int(self) * units.nanoseconds_in_tick

	@property
	def microseconds(self) -> int:
		return _quotient(int(self), units.ticks_in_microsecond)

	@property
	def milliseconds(self) -> int:
		return _quotient(int(self), units.ticks_in_millisecond)

	@property
	def seconds(self) -> int:
		return _quotient(int(self), units.ticks_in_second)

	@property
	def minutes(self) -> int:
		return _quotient(int(self), units.ticks_in_minute)

	@property
	def hours(self) -> int:
		return _quotient(int(self), units.ticks_in_hour)

	@property
	def days(self) -> int:
		return _quotient(int(self), units.ticks_in_day)

	@property
	def interval(self) -> float:
		"""
		# The span in seconds.
		"""
		return int(self) / units.ticks_in_second

	@property
	def time(self):
		"""
		# The &Time whose tick count is the span's.
		"""
		return Time(int(self))

	def __add__(self, operand):
		if isinstance(operand, Time):
			return Time(int(self) + int(operand))
		if isinstance(operand, Span):
			return Span(int(self) + int(operand))
		return NotImplemented
	__radd__ = __add__

	def __sub__(self, operand):
		if isinstance(operand, Span):
			return Span(int(self) - int(operand))
		return NotImplemented

	def __mul__(self, factor):
		if isinstance(factor, int) and not isinstance(factor, core.Unit):
			return Span(int(self) * factor)
		return NotImplemented
	__rmul__ = __mul__

	def __floordiv__(self, divisor):
		"""
		# Truncating division. A &Span divisor yields the &int ratio, an &int
		# divisor yields a &Span.
		"""
		if isinstance(divisor, Span):
			return _quotient(int(self), int(divisor))
		if isinstance(divisor, int) and not isinstance(divisor, core.Unit):
			return Span(_quotient(int(self), divisor))
		return NotImplemented

	def __mod__(self, divisor):
		"""
		# Truncating remainder of the tick counts.
		"""
		if isinstance(divisor, Span):
			return Span(_remainder(int(self), int(divisor)))
		if isinstance(divisor, int) and not isinstance(divisor, core.Unit):
			return Span(_remainder(int(self), divisor))
		return NotImplemented

	def __divmod__(self, divisor):
		"""
		# The truncating quotient and remainder; `(self // divisor, self % divisor)`.
		"""
		q = self.__floordiv__(divisor)
		if q is NotImplemented:
			return q
		return (q, self.__mod__(divisor))

	# Plain integer dividends. Returning &NotImplemented here would fall back
	# to the floored &int operations, so these truncate as well.
	def __rfloordiv__(self, dividend):
		if isinstance(dividend, int) and not isinstance(dividend, core.Unit):
			return _quotient(dividend, int(self))
		return NotImplemented

	def __rmod__(self, dividend):
		if isinstance(dividend, int) and not isinstance(dividend, core.Unit):
			return _remainder(dividend, int(self))
		return NotImplemented

	def __rdivmod__(self, dividend):
		q = self.__rfloordiv__(dividend)
		if q is NotImplemented:
			return q
		return (q, self.__rmod__(dividend))

	def __neg__(self):
		return Span(-int(self))

	def __pos__(self):
		return self

	def __abs__(self):
		return Span(abs(int(self)))
abstract.Measure.register(Span)

class Time(core.Unit):
	"""
	# A point in time measured in ticks since midnight, January 1, 0001 in the
	# proleptic Gregorian calendar. Negative tick counts are points before that
	# midnight.

	# Construction does not check the tick count against &min and &max.

	# [ Arithmetic ]

	# Tick counts are Python integers and never wrap. Sums and differences are
	# exact at any magnitude, including beyond the signed 64-bit range of the
	# serialized form; &.library.pack raises &.core.RangeError for such counts
	# and &.library.check raises it for points outside &min and &max.

	# [ Properties ]

	# /epoch/
		# The point at tick zero.
	# /min/
		# The earliest point considered valid; the beginning of 10000 BC.
	# /max/
		# The latest point considered valid; the end of 9999 AD.
	# /epoch1601/
		# The beginning of 1601; the datum of Windows FILETIME values.
	# /epoch1970/
		# The beginning of 1970; the datum of Unix time.
	"""
	__slots__ = ()

	def leads(self, pit) -> bool:
		return int(self) < int(pit)
	precedes = leads

	def follows(self, pit) -> bool:
		return int(self) > int(pit)

	def elapse(self, span:Span):
		return Time(int(self) + int(span))

	def rollback(self, span:Span):
		return Time(int(self) - int(span))

	def measure(self, pit) -> Span:
		"""
		# The &Span from &self to &pit; negative when &pit leads &self.
		"""
		return Span(int(pit) - int(self))

	def __add__(self, operand):
		if isinstance(operand, Span):
			return Time(int(self) + int(operand))
		return NotImplemented
	__radd__ = __add__

	def __sub__(self, operand):
		if isinstance(operand, Time):
			return Span(int(self) - int(operand))
		if isinstance(operand, Span):
			return Time(int(self) - int(operand))
		return NotImplemented

	def __rsub__(self, operand):
		return NotImplemented

	def _field(self, ticks_in_unit, period):
		return _remainder(_quotient(int(self), ticks_in_unit), period)

	@property
	def hour(self) -> int:
		return self._field(units.ticks_in_hour, units.hours_in_day)

	@property
	def minute(self) -> int:
		return self._field(units.ticks_in_minute, units.minutes_in_hour)

	@property
	def second(self) -> int:
		return self._field(units.ticks_in_second, units.seconds_in_minute)

	@property
	def millisecond(self) -> int:
		return self._field(units.ticks_in_millisecond, 1000)

	@property
	def microsecond(self) -> int:
		"""
		# The microsecond within the current millisecond.
		"""
		return self._field(units.ticks_in_microsecond, 1000)

	@property
	def time_of_day(self) -> Span:
		"""
		# The span elapsed since midnight.

		# The remainder is truncated, so points before the epoch
		# that are not on a midnight have a negative time of day.
		"""
		return Span(_remainder(int(self), units.ticks_in_day))

	@property
	def date(self):
		"""
		# The point at midnight of the day containing &self; `self - self.time_of_day`.
		"""
		return self - self.time_of_day

	@property
	def valid(self) -> bool:
		"""
		# Whether the point lies between &min and &max, inclusive.
		"""
		return int(Time.min) <= int(self) <= int(Time.max)
abstract.Point.register(Time)

if True:
	_limit = (units.days_in_cycle * 25 - 366) * units.ticks_in_day - 1
	_epoch1601 = units.days_in_cycle * 4 * units.ticks_in_day

	Time.epoch = Time(0)
	Time.max = Time(_limit)
	Time.min = Time(-_limit)
	Time.epoch1601 = Time(_epoch1601)
	Time.epoch1970 = Time(_epoch1601 + units.seconds_from_1601_to_1970 * units.ticks_in_second)

	Span.zero = Span(0)
	Span.max = Span((1 << 63) - 1)
	Span.min = Span(-(1 << 63))
	Span.microsecond = Span(units.ticks_in_microsecond)
	Span.millisecond = Span(units.ticks_in_millisecond)
	Span.second = Span(units.ticks_in_second)
	Span.minute = Span(units.ticks_in_minute)
	Span.hour = Span(units.ticks_in_hour)
	Span.day = Span(units.ticks_in_day)

	del _limit, _epoch1601
