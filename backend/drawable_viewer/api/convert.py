"""POST /api/convert — vector drawable XML to intermediate SVG."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from drawable_viewer.errors import ParseError
from drawable_viewer.models.requests import ConvertRequest
from drawable_viewer.models.responses import ConvertResponse
from drawable_viewer.svg.synthesizer import synthesize_svg
from drawable_viewer.vector.parser import parse_vector_drawable

router = APIRouter()


@router.post("/convert", response_model=ConvertResponse)
def convert(req: ConvertRequest) -> ConvertResponse:
    try:
        geometry = parse_vector_drawable(req.xml)
    except ParseError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    return ConvertResponse(
        svg=synthesize_svg(geometry),
        width=geometry.width,
        height=geometry.height,
        fill=geometry.fill_color,
    )
