import logging
from pathlib import Path

import pytest

from snack_catalog.config import CatalogConfig, ensure_directories, load_config
from snack_catalog.core.errors import ConfigError
from snack_catalog.utils.logging import setup_logging

ENV_VARS = ("SNACK_SOURCE_ROOT", "SNACK_IMAGE_ROOT", "SNACK_LOG_LEVEL", "SNACK_LOG_DIR")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_defaults():
    config = load_config()
    assert config == CatalogConfig()
    assert config.image_root == Path("images/store")


def test_yaml_file(tmp_path):
    config_file = tmp_path / "catalog.yaml"
    config_file.write_text(
        "source_root: /data/in\nimage_root: /data/images\nlog_level: debug\nlog_dir: logs\n",
        encoding="utf-8",
    )

    config = load_config(config_file)
    assert config.source_root == Path("/data/in")
    assert config.image_root == Path("/data/images")
    assert config.log_level == "DEBUG"
    assert config.log_dir == Path("logs")


def test_environment_overrides_file(tmp_path, monkeypatch):
    config_file = tmp_path / "catalog.yaml"
    config_file.write_text("image_root: /data/images\n", encoding="utf-8")
    monkeypatch.setenv("SNACK_IMAGE_ROOT", "/srv/images")

    assert load_config(config_file).image_root == Path("/srv/images")


def test_empty_file_uses_defaults(tmp_path):
    config_file = tmp_path / "empty.yaml"
    config_file.write_text("", encoding="utf-8")
    assert load_config(config_file) == CatalogConfig()


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.yaml")


def test_non_mapping_file(tmp_path):
    config_file = tmp_path / "list.yaml"
    config_file.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(config_file)


def test_ensure_directories(tmp_path):
    config = CatalogConfig(source_root=tmp_path / "a" / "src", image_root=tmp_path / "b" / "store")
    ensure_directories(config)
    assert config.source_root.is_dir()
    assert config.image_root.is_dir()


def test_dotenv_in_working_directory(tmp_path, monkeypatch):
    # registers SNACK_IMAGE_ROOT for restoration once .env sets it
    monkeypatch.setenv("SNACK_IMAGE_ROOT", "placeholder")
    monkeypatch.delenv("SNACK_IMAGE_ROOT")
    (tmp_path / ".env").write_text("SNACK_IMAGE_ROOT=/from/dotenv\n", encoding="utf-8")

    assert load_config().image_root == Path("/from/dotenv")


def test_setup_logging_writes_log_file(tmp_path):
    config = CatalogConfig(log_dir=tmp_path / "logs")
    logger = setup_logging(config)
    try:
        logging.getLogger("snack_catalog.tests").warning("image copy failed")
        for handler in logging.getLogger().handlers:
            handler.flush()
        text = (tmp_path / "logs" / "catalog.log").read_text(encoding="utf-8")
    finally:
        for handler in logging.getLogger().handlers[:]:
            logging.getLogger().removeHandler(handler)
            handler.close()

    assert logger.name == "snack_catalog"
    assert "[WARNING] snack_catalog.tests: image copy failed" in text
