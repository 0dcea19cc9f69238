import pytest

from app.config import CommandConfig, DiceConfig, load_config
from app.core import DiceService
from library.loghorizon import LogHorizon

from .helpers import SequenceRandomizer


@pytest.mark.parametrize(
    "text, expected",
    [(".3LH", "3LH"), ("。PCT1", "PCT1"), (". CTRS1 ", "CTRS1"), ("ESTL1", "ESTL1"), ("", "")],
)
def test_strip_prefix(text, expected):
    assert CommandConfig().strip(text) == expected


def test_load_config(tmp_path, monkeypatch):
    root = tmp_path / "config"
    root.mkdir()
    (root / "config.yml").write_text(
        "log_level: DEBUG\nlocale: ja_jp\nseed: 3\ncommand:\n  prefix: ['!']\nunknown: 1\n",
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)
    config = load_config("config")
    assert config.log_level == "DEBUG"
    assert config.seed == 3
    assert config.command.prefix == ["!"]
    assert config.locale_dir is None


def test_load_config_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit):
        load_config("config")


def test_service_handle(catalog):
    randomizer = SequenceRandomizer([6, 6, 1])
    service = DiceService(DiceConfig(), LogHorizon(catalog, randomizer))
    assert service.handle(".3LH>=20") == "(3LH>=20) ＞ 13[6,6,1] ＞ 13 ＞ クリティカル"
    assert randomizer.details == [(6, 6), (6, 6), (1, 6)]
    assert service.handle("。help").startswith("・判定(xLH±y>=z)")
    assert service.handle("hello") is None
    assert service.handle(".") is None


def test_service_builds_system_from_config():
    service = DiceService(DiceConfig(seed=1))
    assert isinstance(service.system, LogHorizon)
    assert service.handle("CTRS+27") == "金銭財宝表(27)：85G"
