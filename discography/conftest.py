import pytest

from .database import Database
from .registry import Registry


@pytest.fixture
def registry():
    with Registry(Database("sqlite://")) as r:
        yield r
