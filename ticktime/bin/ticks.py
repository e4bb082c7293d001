"""
# Print the clock fields of the tick counts given as arguments.

# Each line holds the tick count, the `hour:minute:second.millisecond.microsecond`
# fields, and the date and time of day tick counts. Arguments that are not
# integers are reported on standard error and cause an exit status of `2`.
"""
import sys
from .. import library
from .. import project

line_format = "{0}: {1}:{2}:{3}.{4}.{5} date={6} time_of_day={7}\n"

def describe(pit:library.Time) -> str:
	return line_format.format(
		int(pit), *library.fields(pit),
		int(pit.date), int(pit.time_of_day),
	)

def main(inv, output=sys.stdout, errors=sys.stderr) -> int:
	if not inv:
		errors.write("usage: %s.bin.ticks TICKS...\n" %(project.name,))
		return 2

	status = 0
	for arg in inv:
		try:
			pit = library.Time(int(arg))
		except ValueError:
			errors.write("not a tick count: %r\n" %(arg,))
			status = 2
			continue

		output.write(describe(pit))

	return status

if __name__ == '__main__':
	sys.exit(main(sys.argv[1:]))
