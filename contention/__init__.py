"""
# Function based testing with contentions.

# Test modules define `test_` prefixed functions taking a single &core.Test
# parameter and make assertions by dividing the test by the subject:

#!python
	def test_epoch(test):
		test/Time.epoch.ticks == 0

# &engine.execute runs the functions of a module directly. Under pytest,
# &plugin provides the `test` fixture and turns skip fates into skips.
"""
