"""
# [ About ]

# ticktime is a point in time type based on the built-in Python &int.
# Points are counts of 100-nanosecond intervals, ticks, since midnight,
# January 1, 0001 in the proleptic Gregorian calendar. Measures between points,
# spans, are counts of the same unit.

# The surface functionality is provided by &.library:

#!python
	from ticktime import library as libtick

	pit = libtick.Time(0)
	assert pit == libtick.epoch

# [ Points and Spans ]

# Points and spans combine with the usual operators:

#!python
	later = pit + libtick.Span.of(hour=1, minute=1, second=1)
	assert later - pit == libtick.Span.of(second=3661)
	assert (later.hour, later.minute, later.second) == (1, 1, 1)

# Points are not validated on construction. &libtick.Time.min and
# &libtick.Time.max designate the supported range, 10000 BC through 9999 AD,
# and &libtick.check is available to enforce it:

#!python
	libtick.check(later)

# [ Negative Points ]

# Field extraction divides with truncation toward zero, so points before the
# epoch have zero or negative fields and a negative time of day:

#!python
	before = libtick.Time(-1)
	assert before.second == 0
	assert before.time_of_day == libtick.Span(-1)
	assert before.date + before.time_of_day == before

# [ Datums ]

# Unix time and Windows FILETIME values are offsets from
# &libtick.epoch1970 and &libtick.epoch1601 respectively:

#!python
	assert libtick.from_unix(0) == libtick.epoch1970
	assert libtick.filetime(libtick.epoch1601) == 0
"""
