"""Shared test fixtures for Castle Adventure."""

import pytest

from castle.engine.commands import handle_command
from castle.engine.loader import new_world
from castle.engine.state import PASSWORD, GameState, new_game_state
from castle.engine.world import World
from castle.session import CastleSession

# Shortest winning route from the mountain
WALKTHROUGH = [
    "n",
    "w",
    "get steak",
    "swim",
    "e",
    "feed the steak to the croc",
    "e",
    "use key",
    "e",
    "get carrot",
    "w",
    "w",
    "give carrot to parrot",
    "e",
    "e",
    PASSWORD,
    "s",
    "get treasure",
]


@pytest.fixture
def world() -> World:
    return new_world()


@pytest.fixture
def state() -> GameState:
    return new_game_state()


@pytest.fixture
def session() -> CastleSession:
    return CastleSession.new()


@pytest.fixture
def play(world: World, state: GameState):
    """Run commands in order and return the last response."""

    def _play(*commands: str) -> str:
        response = ""
        for cmd in commands:
            response = handle_command(world, state, cmd)
        return response

    return _play


@pytest.fixture
def walkthrough() -> list[str]:
    return list(WALKTHROUGH)
