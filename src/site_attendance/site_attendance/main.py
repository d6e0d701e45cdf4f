from __future__ import annotations

import importlib
import logging
from types import ModuleType

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container

LOG_FORMAT = "%(asctime)s %(levelname)s [site-attendance] %(name)s: %(message)s"


def configure_logging(level: str | int = logging.INFO) -> None:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)


def load_settings() -> ModuleType:
    load_dotenv(override=False)
    return importlib.import_module(get_settings_module())


def create_container(*, data_path: str | None = None) -> Container:
    settings = load_settings()
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    logger = logging.getLogger(__name__)
    if getattr(settings, "DEBUG", False):
        logger.debug(
            "settings=%s holidays=%s data=%s",
            settings.__name__,
            getattr(settings, "HOLIDAY_CALENDAR_PATH", None) or "built-in",
            data_path or getattr(settings, "ATTENDANCE_DATA_PATH", None),
        )

    return build_container(settings=settings, data_path=data_path)
