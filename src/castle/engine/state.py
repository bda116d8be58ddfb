"""Mutable per-game player state.

The room graph lives in World; this holds where the player is, what they
carry, and whether the game has ended.
"""

from dataclasses import dataclass, field
from enum import Enum

from .world import ObjectSet, RoomId

# Starting position and belongings
START_ROOM = RoomId.MOUNTAIN
STARTING_ITEMS = ("sword",)

# The guard's password, also accepted typed on its own
PASSWORD = "piehole"

# Object names the rules refer to
SWORD = "sword"
KEY = "key"
STEAK = "steak"
CARROT = "carrot"
CROCODILE = "crocodile"
PARROT = "parrot"
GUARD = "guard"
TREASURE = "treasure"
DOOR = "door"


class Outcome(Enum):
    QUIT = "quit"
    WON = "won"


@dataclass
class GameState:
    """All mutable player state."""

    current_room: RoomId = START_ROOM
    inventory: ObjectSet = field(default_factory=ObjectSet)
    turns: int = 0

    # One-shot progress flags
    found_key: bool = False

    # None while playing
    outcome: Outcome | None = None

    @property
    def is_finished(self) -> bool:
        return self.outcome is not None


def new_game_state() -> GameState:
    """Create a fresh game state at the start room with the starting items."""
    return GameState(inventory=ObjectSet(STARTING_ITEMS))
