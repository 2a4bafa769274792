import langtags.config_base as cfg


def test_clean_env_raw():
    assert cfg._clean_env_raw(None) is None
    assert cfg._clean_env_raw("  ") is None
    assert cfg._clean_env_raw("'value'") == "value"
    assert cfg._clean_env_raw('"value"') == "value"
    assert cfg._clean_env_raw("  value ") == "value"


def test_get_env_parsers(monkeypatch):
    monkeypatch.delenv("LANGTAGS_TEST_STR", raising=False)
    assert cfg._get_env_str("LANGTAGS_TEST_STR", "default") == "default"

    monkeypatch.setenv("LANGTAGS_TEST_STR", "  hello ")
    assert cfg._get_env_str("LANGTAGS_TEST_STR", "default") == "hello"

    monkeypatch.setenv("LANGTAGS_TEST_INT", "10")
    assert cfg._get_env_int("LANGTAGS_TEST_INT", 1) == 10
    monkeypatch.setenv("LANGTAGS_TEST_INT", "bad")
    assert cfg._get_env_int("LANGTAGS_TEST_INT", 1) == 1

    monkeypatch.setenv("LANGTAGS_TEST_FLOAT", "3.5")
    assert cfg._get_env_float("LANGTAGS_TEST_FLOAT", 1.0) == 3.5

    monkeypatch.setenv("LANGTAGS_TEST_BOOL", "yes")
    assert cfg._get_env_bool("LANGTAGS_TEST_BOOL", False) is True
    monkeypatch.setenv("LANGTAGS_TEST_BOOL", "off")
    assert cfg._get_env_bool("LANGTAGS_TEST_BOOL", True) is False
    monkeypatch.setenv("LANGTAGS_TEST_BOOL", "maybe")
    assert cfg._get_env_bool("LANGTAGS_TEST_BOOL", True) is True


def test_get_env_enum_and_caps(monkeypatch):
    monkeypatch.setenv("LANGTAGS_TEST_ENUM", "JSON")
    assert cfg._get_env_enum_str("LANGTAGS_TEST_ENUM", default="plex", allowed={"plex", "json"}) == "json"

    monkeypatch.setenv("LANGTAGS_TEST_ENUM", "dlna")
    assert cfg._get_env_enum_str("LANGTAGS_TEST_ENUM", default="plex", allowed={"plex", "json"}) == "plex"

    assert cfg._cap_int("CAP", 0, min_v=1, max_v=64) == 1
    assert cfg._cap_int("CAP", 100, min_v=1, max_v=64) == 64
    assert cfg._cap_int("CAP", 8, min_v=1, max_v=64) == 8
    assert cfg._cap_float_min("CAPF", 0.01, min_v=0.1) == 0.1


def test_parse_env_csv_tokens():
    assert cfg._parse_env_csv_tokens(' "eng, GER ,,eng" ') == ["eng", "ger"]
    assert cfg._parse_env_csv_tokens("Photo,photo,MusicAlbum", lower=False) == ["Photo", "MusicAlbum"]
    assert cfg._parse_env_csv_tokens("") == []


def test_sanitize_filename_component():
    assert cfg._sanitize_filename_component("lang tags/run") == "lang_tags_run"
