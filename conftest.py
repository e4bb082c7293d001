"""Pytest configuration for the ticktime and contention test modules."""

# The ``test`` fixture and the handling of contention fates.
pytest_plugins = ["contention.plugin"]
