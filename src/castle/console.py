"""Line-oriented console front end: read a command, print the narrative."""

from collections.abc import Callable

from .engine.state import Outcome
from .session import CastleSession

PROMPT = "> "

INTRO = "\nWelcome to a simple adventure game!\n"

# Printed once the loop ends; QUIT already said goodbye
CLOSING_MESSAGES: dict[Outcome, str] = {
    Outcome.QUIT: "",
    Outcome.WON: "\nCongratulations, you solved the game!",
}


def run(
    session: CastleSession,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> Outcome:
    """Play until the game finishes and return how it ended.

    read_line is called with the prompt and should raise EOFError when
    input runs out, which counts as quitting.
    """
    write(INTRO)
    write(session.get_room_description())

    while not session.is_finished:
        try:
            line = read_line(PROMPT)
        except EOFError:
            write("")
            line = "quit"

        response = session.process_command(line)
        if response:
            write(response)

    outcome = session.outcome
    assert outcome is not None
    closing = CLOSING_MESSAGES[outcome]
    if closing:
        write(closing)
    return outcome
