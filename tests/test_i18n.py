import pytest

from library.loghorizon import I18n, TranslationMissing


@pytest.fixture
def locale_dir(tmp_path):
    (tmp_path / "ja_jp.yml").write_text(
        "success: 成功\n"
        "LogHorizon:\n"
        "  name: ログ・ホライズン\n"
        "  TRS:\n"
        "    items:\n"
        "      - {7: a, 8: b}\n"
        "      - {9: c}\n",
        encoding="utf-8",
    )
    (tmp_path / "en_us.yml").write_text("success: Success\n", encoding="utf-8")
    yield tmp_path
    I18n.clear_cache()


def test_translate(locale_dir):
    i18n = I18n("ja_jp", locale_dir)
    assert i18n.translate("success") == "成功"
    assert i18n.translate("LogHorizon.name") == "ログ・ホライズン"


def test_fallback_to_default_locale(locale_dir):
    i18n = I18n("en_us", locale_dir)
    assert i18n.translate("success") == "Success"
    assert i18n.translate("LogHorizon.name") == "ログ・ホライズン"


def test_missing_key(locale_dir):
    with pytest.raises(TranslationMissing) as exc_info:
        I18n("ja_jp", locale_dir).translate("LogHorizon.nothing")
    assert exc_info.value.key == "LogHorizon.nothing"
    assert isinstance(exc_info.value, KeyError)


def test_unknown_locale_file_falls_back(locale_dir):
    assert I18n("ko_kr", locale_dir).translate("success") == "成功"


def test_hash_merge(locale_dir):
    i18n = I18n("ja_jp", locale_dir)
    assert i18n.translate_with_hash_merge("LogHorizon.TRS.items") == {7: "a", 8: "b", 9: "c"}


def test_bundled_locale_is_complete(catalog):
    assert catalog.locale == "ja_jp"
    assert set(catalog.consumption) == {"P", "E", "G", "C", "ES", "CS"}
    assert set(catalog.treasure) == {"C", "M", "I", "O", "H", "G"}
    for table in catalog.consumption.values():
        assert all(len(band) == 8 for band in table.bands)
    for kind in ("M", "I", "O"):
        assert set(catalog.treasure[kind].items) >= set(range(7, 163))
    assert set(catalog.exploration.items) == set(range(7, 163))
    assert all(len(table.items) == 36 for table in catalog.d66_tables.values())
    assert all(len(items) == 6 for items in catalog.instrument.items)
