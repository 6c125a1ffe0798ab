import pytest

from inflector import Inflections

# a locale with no loader: its instance starts out empty
BARE_LOCALE = 'xx'


@pytest.fixture(autouse=True)
def english():
    """Give every test a freshly seeded English instance."""
    Inflections.reset()
    yield Inflections.instance()
    Inflections.reset()


@pytest.fixture
def bare():
    Inflections.reset(BARE_LOCALE)
    yield Inflections.instance(BARE_LOCALE)
    Inflections.reset(BARE_LOCALE)
