"""pytest configuration and shared fixtures."""

import logbook
import pytest

from brace_fmt import build_default_formatter
from brace_fmt.logs import logger_group


@pytest.fixture
def formatter():
    """Freshly wired default formatter."""
    return build_default_formatter()


@pytest.fixture
def cyclic_mapping():
    """Mapping that contains itself under the ``me`` key."""
    data = {"name": "loop"}
    data["me"] = data
    return data


@pytest.fixture
def debug_logs():
    """Capture library debug records with a logbook TestHandler."""
    previous = logger_group.level
    logger_group.level = logbook.DEBUG
    try:
        with logbook.TestHandler() as handler:
            yield handler
    finally:
        logger_group.level = previous


@pytest.fixture
def entries_of():
    """Split a flat ``{k = v, k2 = v2}`` rendering into its entries.

    Entry order of a container is not part of the contract, so tests compare
    entry sets.  Only valid when no value itself contains ``", "``.
    """

    def split(rendered: str) -> set:
        assert rendered.startswith("{") and rendered.endswith("}")
        return set(rendered[1:-1].split(", "))

    return split
