"""modules/mapping — map and list rendering of recommended places."""

from modules.mapping.map_renderer import MarkerGroup, RenderedMap, group_by_state, render_places

__all__ = ["MarkerGroup", "RenderedMap", "group_by_state", "render_places"]
