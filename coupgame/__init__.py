"""The card game Coup: players, roles, actions, turn handling and a pygame front end."""

__version__ = "0.1.0"
__all__ = ["roles", "player", "actions", "game", "gui", "app"]