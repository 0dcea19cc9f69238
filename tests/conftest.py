import pytest

from library.loghorizon import I18n, LogHorizon, TableCatalog

from .helpers import SequenceRandomizer


@pytest.fixture(scope="session")
def catalog() -> TableCatalog:
    return TableCatalog.load(I18n())


@pytest.fixture
def roll(catalog):
    def _roll(command: str, *dice: int):
        randomizer = SequenceRandomizer(dice)
        result = LogHorizon(catalog, randomizer).eval(command)
        assert not randomizer.values, "not all dice were used"
        return result

    return _roll
