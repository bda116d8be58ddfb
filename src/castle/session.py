"""Session layer bridging the game engine and the console."""

from .engine.commands import get_room_description, handle_command
from .engine.loader import new_world
from .engine.state import GameState, Outcome, new_game_state
from .engine.world import World
from .logging import get_logger

logger = get_logger(__name__)


class CastleSession:
    """Wraps the World graph and the GameState of one run."""

    def __init__(self, world: World, state: GameState):
        self.world = world
        self.state = state

    @classmethod
    def new(cls) -> "CastleSession":
        """Create a fresh game."""
        session = cls(new_world(), new_game_state())
        logger.info("game_started", room=session.state.current_room.value)
        return session

    @property
    def is_finished(self) -> bool:
        return self.state.is_finished

    @property
    def outcome(self) -> Outcome | None:
        return self.state.outcome

    def process_command(self, raw_input: str) -> str:
        """Delegate to the engine and return response text."""
        was_finished = self.state.is_finished
        response = handle_command(self.world, self.state, raw_input)
        if self.state.is_finished and not was_finished:
            logger.info(
                "game_finished",
                outcome=self.state.outcome.value,
                turns=self.state.turns,
            )
        return response

    def get_room_description(self) -> str:
        return get_room_description(self.world, self.state)

