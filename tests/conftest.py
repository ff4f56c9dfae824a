"""Shared test fixtures."""

import pytest

from timesmith import time
from timesmith.formats import HumanFormat, ISO8601Format


@pytest.fixture
def one_day_two_hours():
    return time().day(1).hour(2)


@pytest.fixture
def human_format():
    return HumanFormat()


@pytest.fixture
def iso_format():
    return ISO8601Format()

