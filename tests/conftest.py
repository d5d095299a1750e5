from __future__ import annotations

import pytest

from tests.helpers import make_fds


@pytest.fixture
def single():
    return make_fds(("A", "B"))


@pytest.fixture
def chain():
    return make_fds(("A", "B"), ("B", "C"))


@pytest.fixture
def disjoint():
    return make_fds(("A", "B"), ("C", "D"))
