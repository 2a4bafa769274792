import pytest

from langtags.languages import REGISTRY, UNDETERMINED_NAME, LanguageRegistry, is_valid, resolve


def test_resolve_accepts_every_variant_case_insensitive():
    for code in ("ger", "deu", "de", "GER", " De "):
        entry = resolve(code)
        assert entry is not None
        assert entry.name == "German"
        assert entry.iso3 == "ger"


def test_unknown_and_empty_codes():
    assert resolve("xxq") is None
    assert resolve("") is None
    assert resolve(None) is None
    assert is_valid("eng") is True
    assert is_valid("zz") is False
    assert "fre" in REGISTRY
    assert 42 not in REGISTRY


def test_to_three_letter_normalizes_known_and_keeps_unknown():
    assert REGISTRY.to_three_letter("en") == "eng"
    assert REGISTRY.to_three_letter("fra") == "fre"
    assert REGISTRY.to_three_letter("QQQ") == "qqq"


def test_name_and_code_conversion():
    assert REGISTRY.name_for("spa") == "Spanish"
    assert REGISTRY.name_for("nope") == "nope"
    assert REGISTRY.code_for_name("French") == "fre"
    assert REGISTRY.code_for_name("english") == "eng"
    assert REGISTRY.code_for_name("de") == "ger"
    assert REGISTRY.code_for_name("Klingon-ish") == "Klingon-ish"


def test_special_codes_present():
    assert UNDETERMINED_NAME == "Undetermined"
    for code in ("und", "mul", "zxx", "mis"):
        assert is_valid(code)


def test_duplicate_codes_rejected():
    rows = [("aaa", None, "aa", "Alpha"), ("bbb", "aaa", None, "Beta")]
    with pytest.raises(ValueError):
        LanguageRegistry(rows)
