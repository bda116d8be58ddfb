"""Build the castle World from its fixed room table.

Each entry lists the room's description, its exits as
(direction, destination, obstruction) and the objects initially lying there.
"""

from .world import Direction, Exit, ObjectSet, Obstruction, Room, RoomId, World

N, S, E, W = Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST
CLEAR = Obstruction.CLEAR

ROOM_TABLE: dict[RoomId, tuple[str, list[tuple], list[str]]] = {
    RoomId.MOUNTAIN: (
        "You are standing on a large grassy mountain.\n"
        "To the north you see a thick forest.\n"
        "Other directions are blocked by steep cliffs.",
        [(N, RoomId.FOREST, CLEAR)],
        [],
    ),
    RoomId.FOREST: (
        "You are in a forest, surrounded by dense trees and shrubs.\n"
        "A wide path slopes gently upwards to the south, and\n"
        "narrow paths lead east and west.",
        [
            (S, RoomId.MOUNTAIN, CLEAR),
            (W, RoomId.LAKE, CLEAR),
            (E, RoomId.OUTSIDE, Obstruction.CROCODILE),
        ],
        ["crocodile", "parrot"],
    ),
    RoomId.LAKE: (
        "You stand on the shore of a beautiful lake, soft sand under\n"
        "your feet.  The clear water looks warm and inviting.",
        [(E, RoomId.FOREST, CLEAR)],
        ["steak"],
    ),
    RoomId.OUTSIDE: (
        "The forest is thinning off here.  To the east you can see a\n"
        "large castle made of dark brown stone.  A narrow path leads\n"
        "back into the forest to the west.",
        [
            (W, RoomId.FOREST, CLEAR),
            (E, RoomId.CASTLE, Obstruction.KEY),
        ],
        [],
    ),
    RoomId.CASTLE: (
        "You are standing inside a magnificent, opulent castle.\n"
        "A staircase leads to the upper levels, but unfortunately\n"
        "it is currently blocked off by rusty delivery crates.\n"
        "A large wooden door leads outside to the west, and a small\n"
        "door leads south.",
        [
            (W, RoomId.OUTSIDE, CLEAR),
            (S, RoomId.TREASURY, Obstruction.PASSWORD),
        ],
        ["guard", "carrot"],
    ),
    RoomId.TREASURY: (
        "Wow!  This room is full of valuable treasures.  Gold, jewels,\n"
        "valuable antiques sit on sturdy shelves against the walls.\n"
        "However...... perhaps money isn't everything??",
        [(N, RoomId.CASTLE, CLEAR)],
        ["treasure"],
    ),
}


def _build_room(room_id: RoomId, entry: tuple[str, list[tuple], list[str]]) -> Room:
    description, exits, objects = entry
    return Room(
        id=room_id,
        description=description,
        exits=[Exit(d, dest, obstruction) for d, dest, obstruction in exits],
        objects=ObjectSet(objects),
    )


def new_world() -> World:
    """Return a freshly built World with every exit in its initial state."""
    world = World()
    for room_id, entry in ROOM_TABLE.items():
        world.add_room(_build_room(room_id, entry))

    # Every exit must lead somewhere that exists
    for room in world.rooms.values():
        for exit_ in room.exits:
            assert exit_.destination in world.rooms
    return world
