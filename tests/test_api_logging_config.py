import logging
import os

from langtags_api import logging_config
from langtags_api.settings import Settings


def _settings(level: str = "INFO") -> Settings:
    return Settings(log_level=level, cors_origins_raw="*", cors_allow_credentials=False, gzip_min_size=0)


def _reset_logger_cache() -> None:
    logging_config._LOGGER_FILE_PATH_CACHED = logging_config._LOGGER_FILE_PATH_SENTINEL


def test_sanitize_filename_component():
    assert logging_config._sanitize_filename_component(" run 1 ") == "run_1"
    assert logging_config._sanitize_filename_component("..") == ""
    assert logging_config._sanitize_filename_component("a/b") == "a_b"


def test_build_logger_file_path_disabled(monkeypatch):
    _reset_logger_cache()
    monkeypatch.setenv("LOGGER_FILE_ENABLED", "0")
    assert logging_config._build_logger_file_path() is None
    assert logging_config._build_logger_file_path() is None


def test_build_logger_file_path_explicit(monkeypatch, tmp_path):
    _reset_logger_cache()
    target = tmp_path / "api.log"
    monkeypatch.setenv("LOGGER_FILE_ENABLED", "1")
    monkeypatch.setenv("LOGGER_FILE_PATH", str(target))
    assert logging_config._build_logger_file_path() == target.resolve()


def test_build_logger_file_path_dir_prefix(monkeypatch, tmp_path):
    _reset_logger_cache()
    monkeypatch.delenv("LOGGER_FILE_PATH", raising=False)
    monkeypatch.setenv("LOGGER_FILE_ENABLED", "true")
    monkeypatch.setenv("LOGGER_FILE_DIR", str(tmp_path))
    monkeypatch.setenv("LOGGER_FILE_PREFIX", "lang*tags")
    monkeypatch.setenv("LOGGER_FILE_TIMESTAMP_FORMAT", "%Y")
    monkeypatch.setenv("LOGGER_FILE_INCLUDE_PID", "0")

    path = logging_config._build_logger_file_path()
    assert path is not None
    assert path.parent == tmp_path.resolve()
    assert path.name.startswith("lang_tags_")
    assert str(os.getpid()) not in path.name


def test_configure_logging_adds_single_file_handler(monkeypatch, tmp_path):
    _reset_logger_cache()
    monkeypatch.delenv("LOGGER_FILE_PATH", raising=False)
    monkeypatch.setenv("LOGGER_FILE_ENABLED", "1")
    monkeypatch.setenv("LOGGER_FILE_DIR", str(tmp_path))

    root = logging.getLogger()
    previous_level = root.level
    try:
        logging_config.configure_logging(_settings("WARNING"))
        logging_config.configure_logging(_settings("INFO"))
        ours = [h for h in root.handlers if getattr(h, logging_config._FILE_HANDLER_TAG, False)]
        assert len(ours) == 1
        assert ours[0].level == logging.INFO
    finally:
        for handler in list(root.handlers):
            if getattr(handler, logging_config._FILE_HANDLER_TAG, False):
                root.removeHandler(handler)
                handler.close()
        root.setLevel(previous_level)
        _reset_logger_cache()
