"""
modules/mapping/map_renderer.py
-------------------------------
Renders recommended places as a Leaflet map (folium) or as a plain list.

  interactive + places  → folium map, one colored layer per state,
                          bounds fitted to all markers (zoom 8 on a single one)
  otherwise             → static HTML list grouped by state

"otherwise" covers clients without a windowed browser context (CLI output,
e-mail, server-side previews) and the empty list.
"""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from typing import Iterable

import folium

from schemas.recommendation import Place

INDIA_CENTER: tuple[float, float] = (20.5937, 78.9629)
COUNTRY_ZOOM = 5
SINGLE_PLACE_ZOOM = 8
FIT_PADDING = (50, 50)

PALETTE: tuple[str, ...] = (
    "#4169E1",  # royal blue
    "#00BFFF",  # deep sky blue
    "#8A2BE2",  # blue violet
    "#4B0082",  # indigo
    "#FF4500",  # red-orange
    "#32CD32",  # lime green
)

MODE_MAP = "map"
MODE_LIST = "list"


@dataclass
class MarkerGroup:
    state: str
    color: str
    places: list[Place] = field(default_factory=list)


@dataclass
class RenderedMap:
    mode: str                 # MODE_MAP | MODE_LIST
    html: str
    groups: list[MarkerGroup] = field(default_factory=list)


def group_by_state(places: Iterable[Place]) -> list[MarkerGroup]:
    """Groups in first-seen state order; colors cycle through PALETTE."""
    groups: dict[str, MarkerGroup] = {}
    for place in places:
        state = place.state or "Unknown"
        if state not in groups:
            groups[state] = MarkerGroup(state=state, color=PALETTE[len(groups) % len(PALETTE)])
        groups[state].places.append(place)
    return list(groups.values())


def _popup_html(place: Place, color: str) -> str:
    state = f"<p style='margin: 2px 0 0 0; font-size: 12px;'>{html.escape(place.state)}</p>" if place.state else ""
    return (
        "<div style='font-family: sans-serif; color: #333; text-align: center;'>"
        f"<b style='color: {color};'>{html.escape(place.name)}</b>{state}</div>"
    )


def build_map(places: list[Place], groups: list[MarkerGroup]) -> folium.Map:
    if len(places) == 1:
        fmap = folium.Map(location=[places[0].lat, places[0].lng], zoom_start=SINGLE_PLACE_ZOOM)
    else:
        fmap = folium.Map(location=list(INDIA_CENTER), zoom_start=COUNTRY_ZOOM)

    for group in groups:
        layer = folium.FeatureGroup(name=group.state)
        for place in group.places:
            folium.CircleMarker(
                location=[place.lat, place.lng],
                radius=8,
                color=group.color,
                fill=True,
                fill_color=group.color,
                fill_opacity=0.85,
                popup=folium.Popup(_popup_html(place, group.color), max_width=250),
                tooltip=place.name,
            ).add_to(layer)
        layer.add_to(fmap)

    if len(places) > 1:
        lats = [p.lat for p in places]
        lngs = [p.lng for p in places]
        fmap.fit_bounds([[min(lats), min(lngs)], [max(lats), max(lngs)]], padding=FIT_PADDING)

    folium.LayerControl(collapsed=False).add_to(fmap)
    return fmap


def render_list(places: list[Place], groups: list[MarkerGroup]) -> str:
    if not places:
        return (
            "<div class='place-list'><h3>Recommended Destinations (0)</h3>"
            "<p>No destinations found. Please try a different query.</p></div>"
        )

    parts = [f"<div class='place-list'><h3>Recommended Destinations ({len(places)})</h3>"]
    for group in groups:
        parts.append(f"<section><h4>{html.escape(group.state)}</h4><ul>")
        for place in group.places:
            parts.append(
                f"<li><span style='display:inline-block;width:10px;height:10px;"
                f"border-radius:50%;background:{group.color};'></span> "
                f"{html.escape(place.name)}</li>"
            )
        parts.append("</ul></section>")
    parts.append("</div>")
    return "".join(parts)


def render_places(places: list[Place], *, interactive: bool = True) -> RenderedMap:
    groups = group_by_state(places)
    if not interactive or not places:
        return RenderedMap(mode=MODE_LIST, html=render_list(places, groups), groups=groups)
    fmap = build_map(places, groups)
    return RenderedMap(mode=MODE_MAP, html=fmap.get_root().render(), groups=groups)
