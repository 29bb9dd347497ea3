"""Headless arena hosting the brains."""

from .game import ArenaGame, Combatant
from .navigation import StraightLineNavigator
from .world import ArenaWorld, Obstacle

__all__ = ["ArenaGame", "ArenaWorld", "Combatant", "Obstacle", "StraightLineNavigator"]
