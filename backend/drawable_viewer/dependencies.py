"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import Depends

from drawable_viewer.config import Settings, settings
from drawable_viewer.icons.loader import IconLoader


def get_settings() -> Settings:
    return settings


def get_icon_loader(cfg: Settings = Depends(get_settings)) -> IconLoader:
    return IconLoader(cfg)
