"""Pytest integration for contention test modules.

Provides the ``test`` fixture and maps contention ``Fate`` exceptions raised
by a test function onto pytest outcomes: ``skip`` fates become skips, and any
other fate propagates and is reported as a failure.
"""

import pytest

from contention import core


def resolve_fate(fate: core.Fate) -> None:
    """Translate a ``Fate`` raised by a test function into a pytest outcome."""
    if fate.subtype == "skip":
        pytest.skip(str(fate.content))
    raise fate


@pytest.hookimpl(hookwrapper=True)
def pytest_pyfunc_call(pyfuncitem):
    """Let ``Test.skip`` skip under pytest instead of failing."""
    outcome = yield
    excinfo = outcome.excinfo
    if excinfo is not None and isinstance(excinfo[1], core.Fate):
        try:
            resolve_fate(excinfo[1])
        except BaseException as exc:
            outcome.force_exception(exc)


@pytest.fixture
def test(request):
    """Provide a contention ``Test`` bound to the requesting test function."""
    subject = core.Test(request.node.name, request.function)
    with subject.exits:
        yield subject
