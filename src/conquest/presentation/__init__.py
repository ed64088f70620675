"""Console rendering for Conquest."""

from conquest.presentation.console import (
    faction_color,
    render_attack,
    render_map,
    render_menu,
    render_mission,
    render_victory,
)

__all__ = [
    "faction_color",
    "render_attack",
    "render_map",
    "render_menu",
    "render_mission",
    "render_victory",
]
