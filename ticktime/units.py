"""
# Unit relationships expressed in ticks, the 100-nanosecond base unit.

# Only fixed-length units are present here; months and years are calendar
# concerns and are only represented by the day counts of the Gregorian cycles
# needed to place the datums.
"""

#: Number of nanoseconds contained in a `tick`.
nanoseconds_in_tick = 100

#: Number of ticks contained in a `microsecond`.
ticks_in_microsecond = 10

#: Number of ticks contained in a `millisecond`.
ticks_in_millisecond = ticks_in_microsecond * 1000

#: Number of ticks contained in a `second`.
ticks_in_second = ticks_in_millisecond * 1000

#: Number of seconds contained in a `minute`.
seconds_in_minute = 60

#: Number of minutes contained in an `hour`.
minutes_in_hour = 60

#: Number of hours contained in an earth `day`.
hours_in_day = 24

#: Number of ticks contained in a `minute`.
ticks_in_minute = ticks_in_second * seconds_in_minute

#: Number of ticks contained in an `hour`.
ticks_in_hour = ticks_in_minute * minutes_in_hour

#: Number of ticks contained in a `day`.
ticks_in_day = ticks_in_hour * hours_in_day

#: Number of days in a common year.
days_in_year = 365

#: Number of days in four Julian years.
days_in_four_years = days_in_year * 4 + 1

#: Number of days in a Gregorian century; the century year is not a leap year.
days_in_century = days_in_four_years * 25 - 1

#: Number of days in a complete Gregorian cycle.
days_in_cycle = days_in_century * 4 + 1

#: Seconds between 1601-01-01 and 1970-01-01.
seconds_from_1601_to_1970 = 11644473600

#: Ticks per unit for the keywords accepted by &.types.Span.of.
unit_ticks = {
	'day': ticks_in_day,
	'hour': ticks_in_hour,
	'minute': ticks_in_minute,
	'second': ticks_in_second,
	'millisecond': ticks_in_millisecond,
	'microsecond': ticks_in_microsecond,
	'tick': 1,
}
