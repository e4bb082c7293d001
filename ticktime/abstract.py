"""
# Abstract base classes for tick measures and points.

# Primarily, this module exists to document the interfaces to &Point and &Measure.
# The concrete classes in &.types are registered here.
"""
from abc import abstractmethod
import typing

class Time(typing.Protocol):
	"""
	# The abstract base class for *all* tick based types.
	"""

	@property
	@abstractmethod
	def ticks(self) -> int:
		"""
		# The number of 100-nanosecond intervals represented by the instance.
		"""

	@abstractmethod
	def compare(self, other) -> int:
		"""
		# Three-way comparison against another instance; `-1`, `0`, or `1`.

		#!python
			assert a.compare(b) == -b.compare(a)
		"""

class Measure(Time):
	"""
	# A signed quantity of ticks; the difference between two points.
	"""

	@property
	@abstractmethod
	def days(self) -> int:
		"""
		# Total number of whole days in the measure, truncated toward zero.
		"""

	@property
	@abstractmethod
	def interval(self) -> float:
		"""
		# The measure in seconds as a &float.
		"""

	@property
	@abstractmethod
	def time(self):
		"""
		# The &Point whose tick count is equal to the measure's.
		"""

class Point(Time):
	"""
	# A point in time.
	"""

	@property
	@abstractmethod
	def date(self):
		"""
		# The point at the beginning of the day containing &self.

		# [ Invariants ]
		#!python
			assert point.date + point.time_of_day == point
		"""

	@property
	@abstractmethod
	def time_of_day(self) -> Measure:
		"""
		# The measure elapsed since &date.
		"""

	@abstractmethod
	def measure(self, pit) -> Measure:
		"""
		# Return the measurement, &Measure instance, between &self and
		# the given point in time, &pit. The delta between the two points.
		"""

	@abstractmethod
	def elapse(self, measure:Measure):
		"""
		# The point in time that occurs &measure after this point.
		"""

	@abstractmethod
	def rollback(self, measure:Measure):
		"""
		# The point in time that occurred &measure before this point.

		# [ Invariants ]
		#!python
			pit == (pit.rollback(measure)).elapse(measure)
		"""

	@abstractmethod
	def leads(self, pit) -> bool:
		"""
		# Returns whether or not the Point in Time, self,
		# comes *before* the given argument, &pit.
		"""

	@abstractmethod
	def follows(self, pit) -> bool:
		"""
		# Returns whether or not the Point in Time, self,
		# comes *after* the given argument, &pit.
		"""
