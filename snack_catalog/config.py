"""Configuration for the catalog: image directories and logging.

Values come from an optional YAML file, then environment variables (a ``.env``
file is loaded first):

    SNACK_SOURCE_ROOT: Directory relative image sources are resolved against
    SNACK_IMAGE_ROOT: Directory holding stored images
    SNACK_LOG_LEVEL: Logging level name (default: INFO)
    SNACK_LOG_DIR: Directory for catalog.log (default: no log file)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml
from dotenv import find_dotenv, load_dotenv

from .core.errors import ConfigError

DEFAULT_SOURCE_ROOT = Path("images/source")
DEFAULT_IMAGE_ROOT = Path("images/store")


@dataclass
class CatalogConfig:
    """Settings shared by the image store and the CLI."""

    source_root: Path = DEFAULT_SOURCE_ROOT
    image_root: Path = DEFAULT_IMAGE_ROOT
    log_level: str = "INFO"
    log_dir: Optional[Path] = None


def _read_yaml(path: Path) -> dict:
    """Load the YAML config file, an empty file counting as no settings."""
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")
    return data


def load_config(config_path: Optional[str | Path] = None) -> CatalogConfig:
    """Return a CatalogConfig from the config file and the environment."""
    load_dotenv(find_dotenv(usecwd=True))
    data = _read_yaml(Path(config_path)) if config_path else {}

    source_root = os.environ.get("SNACK_SOURCE_ROOT") or data.get("source_root") or DEFAULT_SOURCE_ROOT
    image_root = os.environ.get("SNACK_IMAGE_ROOT") or data.get("image_root") or DEFAULT_IMAGE_ROOT
    log_level = os.environ.get("SNACK_LOG_LEVEL") or data.get("log_level") or "INFO"
    log_dir = os.environ.get("SNACK_LOG_DIR") or data.get("log_dir")

    return CatalogConfig(
        source_root=Path(source_root).expanduser(),
        image_root=Path(image_root).expanduser(),
        log_level=str(log_level).upper(),
        log_dir=Path(log_dir).expanduser() if log_dir else None,
    )


def ensure_directories(config: CatalogConfig) -> None:
    """Create the image directories. The image store itself never does."""
    config.source_root.mkdir(parents=True, exist_ok=True)
    config.image_root.mkdir(parents=True, exist_ok=True)
