from langtags.config_tags import DEFAULT_AUDIO_PREFIX, DEFAULT_SUBTITLE_PREFIX, read_tag_settings
from langtags.policy import (
    TagKind,
    build_scan_policy,
    filter_languages,
    normalize_whitelist,
    validate_prefixes,
)
from tests.conftest import make_settings


def test_filter_without_whitelist_only_dedupes():
    assert filter_languages(["eng", "ENG", "fre"], frozenset()) == ["eng", "fre"]


def test_filter_keeps_whitelisted_and_und():
    wl = normalize_whitelist(["ger"])
    assert filter_languages(["eng", "ger", "und"], wl, item_name="x") == ["ger", "und"]


def test_filter_empty_input():
    assert filter_languages([], normalize_whitelist(["eng"])) == []


def test_normalize_whitelist_accepts_two_letter_and_drops_unknown():
    assert normalize_whitelist(["en", "DEU", "xq"]) == frozenset({"eng", "ger", "und"})
    assert normalize_whitelist([]) == frozenset()
    assert normalize_whitelist(["xq"]) == frozenset()


def test_prefix_validation():
    assert validate_prefixes("lang_", "sub_") == ("lang_", "sub_")
    assert validate_prefixes("ab", "sub_") == (DEFAULT_AUDIO_PREFIX, "sub_")
    assert validate_prefixes("   ", "") == (DEFAULT_AUDIO_PREFIX, DEFAULT_SUBTITLE_PREFIX)
    assert validate_prefixes("Same_", "same_") == (DEFAULT_AUDIO_PREFIX, DEFAULT_SUBTITLE_PREFIX)


def test_build_scan_policy_force_full_refresh():
    policy = build_scan_policy(make_settings(always_force_full_refresh=True), full_refresh=False)
    assert policy.full_refresh is True

    policy = build_scan_policy(make_settings(), full_refresh=False)
    assert policy.full_refresh is False


def test_enabled_kinds_and_prefixes():
    policy = build_scan_policy(make_settings(add_subtitle_tags=True), full_refresh=True)
    assert policy.enabled_kinds() == (TagKind.AUDIO, TagKind.SUBTITLE)
    assert policy.prefix_for(TagKind.SUBTITLE) == "subtitle_language_"

    policy = build_scan_policy(make_settings(), full_refresh=True)
    assert policy.enabled_kinds() == (TagKind.AUDIO,)


def test_read_tag_settings_from_env(monkeypatch):
    monkeypatch.setenv("WHITELIST_LANGUAGE_TAGS", "eng, ger,ENG")
    monkeypatch.setenv("ADD_SUBTITLE_TAGS", "true")
    monkeypatch.setenv("SCAN_WORKERS", "500")
    monkeypatch.setenv("NON_MEDIA_ITEM_TYPES", "Photo,MusicAlbum")
    monkeypatch.setenv("AUDIO_LANGUAGE_TAG_PREFIX", "audio_")

    settings = read_tag_settings()
    assert settings.whitelist == ("eng", "ger")
    assert settings.add_subtitle_tags is True
    assert settings.scan_workers == 64
    assert settings.non_media_item_types == ("Photo", "MusicAlbum")
    assert settings.audio_prefix == "audio_"

    monkeypatch.setenv("ADD_SUBTITLE_TAGS", "false")
    assert read_tag_settings().add_subtitle_tags is False
