"""Data structures for the castle world graph.

Rooms, exits and the objects lying in each room. The graph is built once by
loader.new_world(); afterwards only exit obstructions and room contents change.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum

from ..logging import get_logger

logger = get_logger(__name__)


class RoomId(Enum):
    MOUNTAIN = "mountain"
    FOREST = "forest"
    LAKE = "lake"
    OUTSIDE = "outside"  # of the castle
    CASTLE = "castle"  # inside it
    TREASURY = "treasury"


class Direction(Enum):
    """A compass or vertical direction, valued by its full word."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    UP = "up"
    DOWN = "down"

    @classmethod
    def from_word(cls, word: str) -> "Direction | None":
        """Resolve 'n' or 'north' style words; None if not a direction."""
        return DIRECTION_WORDS.get(word)


DIRECTION_WORDS: dict[str, Direction] = {
    **{d.value: d for d in Direction},
    **{d.value[0]: d for d in Direction},
}


class Obstruction(Enum):
    """Guard state of an exit.

    IMPASSABLE is only ever returned for a missing exit; it is never stored.
    Every other blocking kind becomes CLEAR exactly once.
    """

    IMPASSABLE = "impassable"
    CLEAR = "clear"
    KEY = "key"
    CROCODILE = "crocodile"
    PASSWORD = "password"


class ObjectSet:
    """Ordered names of the objects held by one container.

    Objects have no identity beyond their name, so a name is stored at
    most once.
    """

    def __init__(self, names: Iterable[str] = ()):
        self._names: list[str] = []
        for name in names:
            self.add(name)

    def has(self, name: str) -> bool:
        return name in self._names

    def add(self, name: str) -> None:
        if name not in self._names:
            self._names.append(name)

    def remove(self, name: str) -> bool:
        """Remove a name, reporting whether it was present."""
        if name not in self._names:
            return False
        self._names.remove(name)
        return True

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._names))

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"ObjectSet({self._names!r})"


@dataclass
class Exit:
    """A directed edge: direction → destination, guarded by an obstruction."""

    direction: Direction
    destination: RoomId
    obstruction: Obstruction = Obstruction.CLEAR


@dataclass
class Room:
    """A location in the game world."""

    id: RoomId
    description: str = ""
    exits: list[Exit] = field(default_factory=list)
    objects: ObjectSet = field(default_factory=ObjectSet)

    def exit_to(self, direction: Direction) -> Exit | None:
        for exit_ in self.exits:
            if exit_.direction == direction:
                return exit_
        return None


@dataclass
class World:
    """The room graph: every location, its exits and its contents."""

    rooms: dict[RoomId, Room] = field(default_factory=dict)

    def add_room(self, room: Room) -> None:
        """Register a room while building the world."""
        seen: set[Direction] = set()
        for exit_ in room.exits:
            assert exit_.direction not in seen, (
                f"{room.id.name} has two exits {exit_.direction.name}"
            )
            assert exit_.obstruction != Obstruction.IMPASSABLE
            seen.add(exit_.direction)
        self.rooms[room.id] = room

    def obstruction_at(self, room_id: RoomId, direction: Direction) -> Obstruction:
        """Return the exit's obstruction, or IMPASSABLE if there is no exit."""
        exit_ = self.rooms[room_id].exit_to(direction)
        if exit_ is None:
            return Obstruction.IMPASSABLE
        return exit_.obstruction

    def destination(self, room_id: RoomId, direction: Direction) -> RoomId | None:
        exit_ = self.rooms[room_id].exit_to(direction)
        if exit_ is None:
            return None
        return exit_.destination

    def clear_exit(self, room_id: RoomId, direction: Direction) -> None:
        """Permanently clear an exit. No-op if missing or already clear."""
        exit_ = self.rooms[room_id].exit_to(direction)
        if exit_ is None or exit_.obstruction == Obstruction.CLEAR:
            return
        logger.info(
            "exit_cleared",
            room=room_id.value,
            direction=direction.value,
            was=exit_.obstruction.value,
        )
        exit_.obstruction = Obstruction.CLEAR

    def objects_in(self, room_id: RoomId) -> ObjectSet:
        return self.rooms[room_id].objects

    def add_object(self, room_id: RoomId, name: str) -> None:
        self.rooms[room_id].objects.add(name)

    def remove_object(self, room_id: RoomId, name: str) -> bool:
        return self.rooms[room_id].objects.remove(name)

    def describe(self, room_id: RoomId) -> str:
        """Static room text followed by a line per object present."""
        room = self.rooms[room_id]
        lines = [room.description]
        lines.extend(f"There is a {name} here." for name in room.objects)
        return "\n".join(lines)
