"""
# Sanity checks regarding the datums and their derivation.
"""
from .. import constants as module
from .. import types
from .. import units

def test_epoch(test):
	test/module.epoch.ticks == 0
	test/module.epoch == types.Time(0)
	test.isinstance(module.epoch, types.Time)

def test_limits(test):
	limit = (types.Span.DaysPer400Years * 25 - 366) * types.Span.TicksPerDay
	test/module.max.ticks == limit - 1
	test/module.min.ticks == -(limit - 1)
	test/module.max.ticks == 3155378975999999999

	# Symmetric around the epoch.
	test/module.min.ticks == -module.max.ticks
	test/module.min < module.epoch
	test/module.epoch < module.max

def test_limits_are_day_aligned(test):
	test/module.max.hour == 23
	test/module.max.minute == 59
	test/module.max.second == 59
	test/(module.max + types.Span(1)).time_of_day == types.Span(0)
	test/(module.min - types.Span(1)).time_of_day == types.Span(0)

def test_epoch1601(test):
	test/module.epoch1601.ticks == types.Span.DaysPer400Years * 4 * types.Span.TicksPerDay
	test/module.epoch1601.ticks == 504911232000000000
	test/module.epoch1601.time_of_day == types.Span(0)

def test_epoch1970(test):
	test/module.epoch1970.ticks == 621355968000000000
	test/(module.epoch1970 - module.epoch1601).ticks == 11644473600 * units.ticks_in_second
	test.isinstance(module.epoch1970 - module.epoch1601, types.Span)
	test/module.epoch1970.date == module.epoch1970

def test_span_aliases(test):
	test/module.zero == types.Span(0)
	test/module.second == types.Span.second
	test/module.day == module.hour * 24
	test/module.hour == module.minute * 60
	test/module.minute == module.second * 60
	test/module.second == module.millisecond * 1000
	test/module.millisecond == module.microsecond * 1000

def test_exports(test):
	for name in module.__all__:
		test.isinstance(getattr(module, name), (types.Time, types.Span))

	namespace = {}
	exec("from ticktime.constants import *", namespace)
	test/("types" in namespace) == False
	test/namespace["max"] == types.Time.max
	test/namespace["min"] == types.Time.min

if __name__ == '__main__':
	import sys; from contention import engine
	engine.execute(sys.modules[__name__])
