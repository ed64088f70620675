"""Interactive game session."""

from conquest.session.game_loop import GameSession, MenuOption, parse_int, select_territories

__all__ = ["GameSession", "MenuOption", "parse_int", "select_territories"]
