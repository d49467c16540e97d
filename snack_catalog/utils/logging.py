"""Logging helpers."""

import logging

from ..config import CatalogConfig


def setup_logging(config: CatalogConfig) -> logging.Logger:
    """Configure and return the package logger."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.log_dir is not None:
        config.log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(config.log_dir / "catalog.log", encoding="utf-8"))
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
        force=True,
    )
    return logging.getLogger("snack_catalog")
