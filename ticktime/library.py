"""
# Primary public module.

# Provides access to the &Time and &Span types, the datums, and the
# conversions needed to exchange tick counts with systems using other epochs.
"""
import struct

from . import core
from . import units
from .types import *
from .constants import *

__shortname__ = 'libtick'

_int64 = struct.Struct('!q')
_int64_bounds = (-(1 << 63), (1 << 63) - 1)

def check(pit:Time) -> Time:
	"""
	# Return &pit if it lies between &Time.min and &Time.max, inclusive.
	# Otherwise, raise a &core.RangeError.

	# Construction and arithmetic never validate; this is the point where
	# callers opt in.
	"""
	if not pit.valid:
		raise core.RangeError(int(pit), int(Time.min), int(Time.max))
	return pit

def fields(pit:Time) -> tuple:
	"""
	# The clock face of &pit: `(hour, minute, second, millisecond, microsecond)`.
	"""
	return (pit.hour, pit.minute, pit.second, pit.millisecond, pit.microsecond)

def from_unix(seconds, Time=Time) -> Time:
	"""
	# Construct a &Time from the number of seconds since 1970-01-01.

	# Floating point &seconds are rounded to the nearest tick.
	"""
	if isinstance(seconds, int):
		offset = seconds * units.ticks_in_second
	else:
		offset = int(Span.from_interval(seconds))
	return Time(int(Time.epoch1970) + offset)

def unix(pit:Time) -> float:
	"""
	# The number of seconds between 1970-01-01 and &pit.
	"""
	return Time.epoch1970.measure(pit).interval

def from_unix_ticks(ticks:int, Time=Time) -> Time:
	"""
	# Construct a &Time from a tick count relative to 1970-01-01.
	"""
	return Time(int(Time.epoch1970) + ticks)

def unix_ticks(pit:Time) -> int:
	"""
	# The tick count of &pit relative to 1970-01-01.
	"""
	return int(pit) - int(Time.epoch1970)

def from_filetime(value:int, Time=Time) -> Time:
	"""
	# Construct a &Time from a tick count relative to 1601-01-01.
	"""
	return Time(int(Time.epoch1601) + value)

def filetime(pit:Time) -> int:
	"""
	# The tick count of &pit relative to 1601-01-01.
	"""
	return int(pit) - int(Time.epoch1601)

def pack(pit, pack=_int64.pack, bounds=_int64_bounds) -> bytes:
	"""
	# Serialize the tick count of &pit as a big-endian signed 64-bit integer.

	# [ Exceptions ]
	# /&core.RangeError/
		# The tick count cannot be represented in 64 bits.
	"""
	ticks = int(pit)
	low, high = bounds
	if ticks < low or ticks > high:
		raise core.RangeError(ticks, low, high)
	return pack(ticks)

def unpack(data:bytes, unpack=_int64.unpack, Time=Time) -> Time:
	"""
	# Restore a &Time from the eight bytes produced by &pack.
	"""
	return Time(unpack(data)[0])
