"""
api/routes/map_view.py
----------------------
POST /map — renders a place list as an HTML page.

Body {places, interactive}. ``interactive=false`` (or an empty list) returns
the static list view instead of the Leaflet map.
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from modules.mapping import render_places
from schemas.recommendation import MapRequest

router = APIRouter()


@router.post("/map", summary="Render places on a map", response_class=HTMLResponse)
def render_map(req: MapRequest) -> HTMLResponse:
    rendered = render_places(req.places, interactive=req.interactive)
    return HTMLResponse(content=rendered.html, headers={"X-Render-Mode": rendered.mode})
