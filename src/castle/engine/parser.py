"""Turn a raw input line into a Command.

tokenize() normalizes the words; interpret() picks out the verb and up to
two nouns.
"""

from dataclasses import dataclass
from enum import Enum

from .state import PASSWORD
from .world import DIRECTION_WORDS

# Words that carry no meaning for the interpreter
FILLER_WORDS = frozenset({"a", "an", "the", "to", "with"})

ABBREVIATIONS = {
    "croc": "crocodile",
}


class Verb(Enum):
    HELP = "help"
    QUIT = "quit"
    INVENTORY = "inventory"
    LOOK = "look"
    GO = "go"
    DROP = "drop"
    TAKE = "take"
    GIVE = "give"
    FEED = "feed"
    ATTACK = "attack"
    OPEN = "open"
    SWIM = "swim"
    SAY = "say"
    USE = "use"


VERB_ALIASES: dict[str, Verb] = {
    "help": Verb.HELP,
    **dict.fromkeys(("exit", "quit", "q"), Verb.QUIT),
    **dict.fromkeys(("i", "inv", "invent", "inventory"), Verb.INVENTORY),
    **dict.fromkeys(("look", "l"), Verb.LOOK),
    **dict.fromkeys(("go", "walk"), Verb.GO),
    "drop": Verb.DROP,
    **dict.fromkeys(("get", "take"), Verb.TAKE),
    **dict.fromkeys(("give", "offer"), Verb.GIVE),
    "feed": Verb.FEED,
    **dict.fromkeys(("kill", "attack", "hit", "fight"), Verb.ATTACK),
    **dict.fromkeys(("open", "unlock"), Verb.OPEN),
    **dict.fromkeys(("swim", "dive"), Verb.SWIM),
    **dict.fromkeys(("say", "speak", "tell"), Verb.SAY),
    **dict.fromkeys(("use", "apply"), Verb.USE),
}


@dataclass(frozen=True)
class Command:
    """An interpreted command.

    verb is None when nothing could be parsed (word == "") or when the
    verb word is not recognized (word holds it).
    """

    verb: Verb | None
    noun1: str | None = None
    noun2: str | None = None
    word: str = ""


def _normalize_word(word: str) -> str:
    """Lowercase a word, then blank out filler and expand abbreviations."""
    word = word.lower()
    if word in FILLER_WORDS:
        return ""
    return ABBREVIATIONS.get(word, word)


def tokenize(raw_input: str) -> list[str] | None:
    """Split and normalize a line; None for a blank line."""
    words = raw_input.split()
    if not words:
        return None
    return [w for w in map(_normalize_word, words) if w]


def interpret(tokens: list[str]) -> Command:
    """Map normalized tokens to a Command."""
    if not tokens:
        return Command(verb=None)

    word = tokens[0]
    noun1 = tokens[1] if len(tokens) > 1 else None
    noun2 = tokens[2] if len(tokens) > 2 else None

    # The password is usually typed on its own rather than after "say"
    if word == PASSWORD:
        return Command(Verb.SAY, PASSWORD, None, word)

    if word in DIRECTION_WORDS:
        return Command(Verb.GO, word, None, word)

    verb = VERB_ALIASES.get(word)
    return Command(verb, noun1, noun2, word)
