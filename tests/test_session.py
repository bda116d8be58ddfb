"""Tests for the session and console run loop."""

from collections.abc import Iterator

import pytest

from castle.console import CLOSING_MESSAGES, INTRO, PROMPT, run
from castle.engine.state import PASSWORD, Outcome
from castle.engine.world import RoomId
from castle.session import CastleSession


def _reader(lines: list[str]):
    """Fake read_line that serves lines, then raises EOFError."""
    it: Iterator[str] = iter(lines)
    prompts: list[str] = []

    def read_line(prompt: str) -> str:
        prompts.append(prompt)
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    read_line.prompts = prompts
    return read_line


def test_new_session(session: CastleSession):
    assert session.state.current_room == RoomId.MOUNTAIN
    assert not session.is_finished
    assert session.outcome is None
    assert "grassy mountain" in session.get_room_description()


def test_process_command(session: CastleSession):
    assert "forest" in session.process_command("north")
    assert session.state.current_room == RoomId.FOREST


def test_run_until_quit(session: CastleSession):
    output: list[str] = []
    read_line = _reader(["look", "", "quit", "north"])

    outcome = run(session, read_line, output.append)

    assert outcome == Outcome.QUIT
    assert output[0] == INTRO
    assert output[1] == session.get_room_description()
    # The blank line produced no output; the loop stopped before "north"
    assert output[2:] == [
        "\n" + session.get_room_description(),
        "Goodbye!",
    ]
    assert read_line.prompts == [PROMPT] * 3
    assert session.state.current_room == RoomId.MOUNTAIN


def test_run_to_victory(session: CastleSession, walkthrough: list[str]):
    output: list[str] = []
    outcome = run(session, _reader(walkthrough), output.append)

    assert outcome == Outcome.WON
    assert output[-1] == CLOSING_MESSAGES[Outcome.WON]
    assert "happily ever after" in output[-2]


def test_end_of_input_quits(session: CastleSession):
    output: list[str] = []
    outcome = run(session, _reader(["n"]), output.append)
    assert outcome == Outcome.QUIT
    assert output[-1] == "Goodbye!"


@pytest.mark.parametrize("line", ["say hello", "xyzzy", "get parrot"])
def test_run_keeps_going_after_failures(session: CastleSession, line: str):
    output: list[str] = []
    outcome = run(session, _reader([line, "q"]), output.append)
    assert outcome == Outcome.QUIT
    assert len(output) == 4


def test_password_works_from_console(session: CastleSession):
    session.state.current_room = RoomId.CASTLE
    assert "Welcome Sire!" in session.process_command(PASSWORD)
