"""Command dispatch and handler functions.

handle_command(world, state, raw_input) -> str is the main entry point.
It tokenizes, interprets, and dispatches to handler functions.
Handlers check every precondition before touching world or state, then
mutate in place and return descriptive text.
"""

from collections.abc import Callable

from ..logging import get_logger
from .parser import Verb, interpret, tokenize
from .state import (
    CARROT,
    CROCODILE,
    DOOR,
    GUARD,
    KEY,
    PARROT,
    PASSWORD,
    STEAK,
    SWORD,
    TREASURE,
    GameState,
    Outcome,
)
from .world import Direction, Obstruction, RoomId, World

logger = get_logger(__name__)

# Exits opened by the puzzles
CASTLE_DOOR = (RoomId.OUTSIDE, Direction.EAST)
CROCODILE_PATH = (RoomId.FOREST, Direction.EAST)
TREASURY_DOOR = (RoomId.CASTLE, Direction.SOUTH)

Handler = Callable[[World, GameState, str | None, str | None], str]


def handle_command(world: World, state: GameState, raw_input: str) -> str:
    """Process a command and return the response text."""
    tokens = tokenize(raw_input)
    if tokens is None:
        return ""

    if state.is_finished:
        return "The game is over."

    command = interpret(tokens)
    if command.verb is None:
        if not command.word:
            return "Huh??"
        logger.debug("unknown_command", word=command.word)
        return f"I don't understand '{command.word}'"

    state.turns += 1
    logger.debug(
        "command_handled",
        verb=command.verb.value,
        noun1=command.noun1,
        noun2=command.noun2,
        room=state.current_room.value,
        turns=state.turns,
    )
    handler = _VERB_DISPATCH[command.verb]
    return handler(world, state, command.noun1, command.noun2)


def get_room_description(world: World, state: GameState) -> str:
    """Get the description of the current room, objects included."""
    return world.describe(state.current_room)


def get_inventory(state: GameState) -> list[str]:
    """Get list of carried items."""
    return list(state.inventory)


def _here(world: World, state: GameState, name: str) -> bool:
    return world.objects_in(state.current_room).has(name)


def _cmd_help(
    world: World, state: GameState, noun1: str | None = None, noun2: str | None = None
) -> str:
    """Handle HELP command."""
    return (
        "Use text commands to walk around and do things.\n"
        "Some examples:\n"
        "    go north\n"
        "    get the rope\n"
        "    drop the lantern\n"
        "    inventory\n"
        "    unlock door\n"
        "    kill the serpent\n"
        "    quit"
    )


def _cmd_quit(
    world: World, state: GameState, noun1: str | None = None, noun2: str | None = None
) -> str:
    """Handle QUIT command."""
    state.outcome = Outcome.QUIT
    return "Goodbye!"


def _cmd_inventory(
    world: World, state: GameState, noun1: str | None = None, noun2: str | None = None
) -> str:
    """Handle INVENTORY command."""
    items = get_inventory(state)
    if not items:
        return "You are carrying:\n    nothing."
    return "You are carrying:\n" + "\n".join(f"    a {item}." for item in items)


def _cmd_look(
    world: World, state: GameState, noun1: str | None = None, noun2: str | None = None
) -> str:
    """Handle LOOK command."""
    return "\n" + get_room_description(world, state)


def _blocked_message(obstruction: Obstruction) -> str | None:
    """Explain why an exit can't be used; None if it is clear."""
    match obstruction:
        case Obstruction.CLEAR:
            return None
        case Obstruction.IMPASSABLE:
            return "You cannot go that way."
        case Obstruction.KEY:
            return "The castle door is locked!"
        case Obstruction.CROCODILE:
            return "A huge, scary crocodile blocks your path!"
        case Obstruction.PASSWORD:
            return (
                'The guard stops you and says "Hey, you cannot go in there\n'
                'unless you tell me the password!".'
            )


def _cmd_go(
    world: World, state: GameState, noun1: str | None = None, noun2: str | None = None
) -> str:
    """Handle movement commands."""
    if noun1 is None:
        return "Go where??"

    direction = Direction.from_word(noun1)
    if direction is None:
        return "I don't understand that direction."

    blocked = _blocked_message(world.obstruction_at(state.current_room, direction))
    if blocked:
        return blocked

    dest = world.destination(state.current_room, direction)
    assert dest is not None, f"clear exit {direction.name} has no destination"
    state.current_room = dest
    return "\n" + get_room_description(world, state)


# Things that are present but never end up in the inventory
_UNTAKEABLE: dict[str, str] = {
    CROCODILE: "Are you serious?  The only thing you would get is eaten!",
    PARROT: "The parrot nimbly evades your grasp.",
    GUARD: "A momentary blush suggests the guard was flattered.",
}


def _cmd_take(
    world: World, state: GameState, noun1: str | None = None, noun2: str | None = None
) -> str:
    """Handle TAKE/GET commands."""
    if noun1 is None:
        return "Get what??"

    refusal = _UNTAKEABLE.get(noun1)
    if refusal:
        return refusal

    if not world.remove_object(state.current_room, noun1):
        return f"There is no {noun1} here you can take."
    state.inventory.add(noun1)

    if noun1 == TREASURE:
        state.outcome = Outcome.WON
        return (
            "You pick up the treasure.\n\n"
            "With your good health and new-found wealth, you live\n"
            "happily ever after (well... about 50 years or so)."
        )
    return f"You pick up the {noun1}."


def _cmd_drop(
    world: World, state: GameState, noun1: str | None = None, noun2: str | None = None
) -> str:
    """Handle DROP commands."""
    if noun1 is None:
        return "Drop what??"

    if not state.inventory.remove(noun1):
        return f"You are not carrying a {noun1}."
    world.add_object(state.current_room, noun1)
    return f"You drop the {noun1}."


def _give_carrot_to_parrot(world: World, state: GameState) -> str:
    state.inventory.remove(CARROT)
    return (
        "The parrot happily starts chewing on the carrot.  Every now\n"
        f'and then you hear it say "{PASSWORD}" as it munches away.\n'
        "I wonder who this parrot belonged to??"
    )


def _give_steak_to_crocodile(world: World, state: GameState) -> str:
    state.inventory.remove(STEAK)
    removed = world.remove_object(state.current_room, CROCODILE)
    assert removed, "crocodile vanished before it could be fed"
    world.clear_exit(*CROCODILE_PATH)
    return (
        "You hurl the steak towards the crocodile, which suddenly\n"
        "snaps into action, grabbing the steak in its steely jaws\n"
        "and slithering off to devour its meal in private."
    )


# (item, recipient) → effect
_GIVE_RULES: dict[tuple[str, str], Callable[[World, GameState], str]] = {
    (CARROT, PARROT): _give_carrot_to_parrot,
    (STEAK, CROCODILE): _give_steak_to_crocodile,
}


def _cmd_give(
    world: World, state: GameState, noun1: str | None = None, noun2: str | None = None
) -> str:
    """Handle GIVE/OFFER commands."""
    if noun1 is None or noun2 is None:
        return "Give what to whom??"

    if not state.inventory.has(noun1):
        return f"You can't give a {noun1}, as you don't have one!"

    if not _here(world, state, noun2):
        return f"There is no {noun2} here."

    rule = _GIVE_RULES.get((noun1, noun2))
    if rule is None:
        return "Don't be ridiculous!"
    return rule(world, state)


def _cmd_feed(
    world: World, state: GameState, noun1: str | None = None, noun2: str | None = None
) -> str:
    """Handle FEED command."""
    if noun1 is None or noun2 is None:
        return "Feed what to whom??"
    return _cmd_give(world, state, noun1, noun2)


def _cmd_attack(
    world: World, state: GameState, noun1: str | None = None, noun2: str | None = None
) -> str:
    """Handle KILL/ATTACK commands."""
    if noun1 is None:
        return "Attack what??"

    have_sword = state.inventory.has(SWORD)

    if noun1 == CROCODILE:
        return (
            "The mere thought of wrestling with that savage beast\n"
            "paralyses you with fear!"
        )

    if noun1 == GUARD:
        if have_sword:
            return (
                "You and the guard begin a dangerous sword fight!\n"
                "But after ten minutes or so, you are both exhausted and\n"
                "decide to call it a draw."
            )
        return (
            "You raise your hands to fight, then notice that the guard\n"
            "is carrying a sword, so you shadow box for a while instead."
        )

    if have_sword:
        return "You swing your sword, but miss!"
    return "You bruise your hand in the attempt."


def _open_castle_door(world: World, state: GameState) -> str:
    if world.obstruction_at(*CASTLE_DOOR) == Obstruction.CLEAR:
        return "The castle door is already unlocked."
    if not state.inventory.has(KEY):
        return "You don't have a key!"

    state.inventory.remove(KEY)
    world.clear_exit(*CASTLE_DOOR)
    return (
        "Carefully you insert the rusty old key in the lock, and turn it.\n"
        "Yes!!  The door unlocks!  However the key breaks into several\n"
        "pieces and is useless now."
    )


def _cmd_open(
    world: World, state: GameState, noun1: str | None = None, noun2: str | None = None
) -> str:
    """Handle OPEN/UNLOCK commands."""
    if noun1 is None:
        return "Open what??"

    if noun1 == DOOR and state.current_room == CASTLE_DOOR[0]:
        return _open_castle_door(world, state)

    return "You cannot open that!"


def _cmd_use(
    world: World, state: GameState, noun1: str | None = None, noun2: str | None = None
) -> str:
    """Handle USE/APPLY commands."""
    if noun1 is None:
        return "Use what??"

    if not state.inventory.has(noun1):
        return f"You don't have any {noun1} to use."

    if noun1 == KEY:
        return _cmd_open(world, state, DOOR)

    return f"You fiddle with your {noun1}, but nothing happens."


def _cmd_swim(
    world: World, state: GameState, noun1: str | None = None, noun2: str | None = None
) -> str:
    """Handle SWIM/DIVE commands."""
    match state.current_room:
        case RoomId.LAKE if state.found_key:
            return "You enjoy a nice swim in the lake."
        case RoomId.LAKE:
            state.found_key = True
            state.inventory.add(KEY)
            logger.info("key_found", turns=state.turns)
            return (
                "You dive into the lake, enjoy paddling around for a while.\n"
                "Diving a bit deeper, you discover a rusty old key!"
            )
        case RoomId.OUTSIDE:
            return "But the moat is full of crocodiles!"
        case _:
            return "There is nowhere to swim here."


def _cmd_say(
    world: World, state: GameState, noun1: str | None = None, noun2: str | None = None
) -> str:
    """Handle SAY command, and the password typed on its own."""
    if noun1 is None:
        return "Say what??"

    if noun1 == PASSWORD and state.current_room == TREASURY_DOOR[0]:
        world.clear_exit(*TREASURY_DOOR)
        return (
            'The guard says "Welcome Sire!" and beckons you to enter\n'
            "the treasury."
        )

    return f'You say "{noun1}" but nothing happens.'


_VERB_DISPATCH: dict[Verb, Handler] = {
    Verb.HELP: _cmd_help,
    Verb.QUIT: _cmd_quit,
    Verb.INVENTORY: _cmd_inventory,
    Verb.LOOK: _cmd_look,
    Verb.GO: _cmd_go,
    Verb.DROP: _cmd_drop,
    Verb.TAKE: _cmd_take,
    Verb.GIVE: _cmd_give,
    Verb.FEED: _cmd_feed,
    Verb.ATTACK: _cmd_attack,
    Verb.OPEN: _cmd_open,
    Verb.SWIM: _cmd_swim,
    Verb.SAY: _cmd_say,
    Verb.USE: _cmd_use,
}
