"""GET /api/icons/* — thumbnails, native-size icons and intermediate SVG.

Endpoints are sync so FastAPI runs each render in its worker thread pool.
An absent icon is a normal outcome and maps to 404; the client shows its
own placeholder.
"""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from drawable_viewer.config import Settings
from drawable_viewer.dependencies import get_icon_loader, get_settings
from drawable_viewer.icons.loader import Icon, IconLoader

router = APIRouter(prefix="/icons")


def _resolve(path: str, cfg: Settings) -> Path:
    """Resolve a client path under resource_root, rejecting escapes."""
    root = Path(cfg.resource_root).resolve()
    candidate = (root / path).resolve()
    if not candidate.is_relative_to(root):
        raise HTTPException(status_code=400, detail="path escapes resource root")
    return candidate


def _png(icon: Icon | None) -> Response:
    if icon is None:
        raise HTTPException(status_code=404, detail="no icon")
    return Response(content=icon.to_png(), media_type="image/png")


@router.get("/thumbnail")
def thumbnail(
    path: str = Query(..., description="File path relative to the resource root"),
    cfg: Settings = Depends(get_settings),
    loader: IconLoader = Depends(get_icon_loader),
) -> Response:
    return _png(loader.load_thumbnail(_resolve(path, cfg)))


@router.get("/original")
def original(
    path: str = Query(..., description="File path relative to the resource root"),
    cfg: Settings = Depends(get_settings),
    loader: IconLoader = Depends(get_icon_loader),
) -> Response:
    return _png(loader.load_original(_resolve(path, cfg)))


@router.get("/svg")
def svg(
    path: str = Query(..., description="Vector drawable path relative to the resource root"),
    cfg: Settings = Depends(get_settings),
    loader: IconLoader = Depends(get_icon_loader),
) -> Response:
    svg_text = loader.synthesize(_resolve(path, cfg))
    if svg_text is None:
        raise HTTPException(status_code=404, detail="not a parseable vector drawable")
    return Response(content=svg_text, media_type="image/svg+xml")
