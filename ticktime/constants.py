"""
# Various constants.

# [ Elements ]

# /epoch/
	# &types.Time instance at tick zero; midnight, January 1, 0001.
# /max/
	# The latest valid &types.Time; the last tick of 9999.
# /min/
	# The earliest valid &types.Time; the first tick of 10000 BC.
# /epoch1601/
	# &types.Time instance referring to 1601; the FILETIME datum.
# /epoch1970/
	# &types.Time instance referring to 1970; the Unix datum.
# /zero/
	# The empty &types.Span.
"""
from . import types

__all__ = [
	"epoch", "max", "min", "epoch1601", "epoch1970",
	"zero", "microsecond", "millisecond", "second", "minute", "hour", "day",
]

epoch = types.Time.epoch
max = types.Time.max
min = types.Time.min
epoch1601 = types.Time.epoch1601
epoch1970 = types.Time.epoch1970

zero = types.Span.zero
microsecond = types.Span.microsecond
millisecond = types.Span.millisecond
second = types.Span.second
minute = types.Span.minute
hour = types.Span.hour
day = types.Span.day
