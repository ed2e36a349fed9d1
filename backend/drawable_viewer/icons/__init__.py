"""Icon loading facade."""

from drawable_viewer.icons.loader import (
    Icon,
    IconLoader,
    IconRequest,
    LoadResult,
    load_original,
    load_thumbnail,
)

__all__ = [
    "Icon",
    "IconLoader",
    "IconRequest",
    "LoadResult",
    "load_original",
    "load_thumbnail",
]
