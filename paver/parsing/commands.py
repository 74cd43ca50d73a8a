"""Command extraction from executable code blocks.

This module turns the text of a shell code block into discrete commands:
- Blank lines and ``#`` comment lines separate commands
- A leading ``$ `` prompt is stripped
- A trailing backslash continues the command on the next line
"""

from enum import Enum

from paver.core.classifier import block_lines


PROMPT = "$ "
CONTINUATION = "\\"


class _State(Enum):
    """Extractor state."""
    IDLE = "idle"
    ACCUMULATING = "accumulating"


def _strip_prompt(line: str) -> str:
    if line.startswith(PROMPT):
        return line[len(PROMPT):]
    return line


def _emit(commands: list[str], accumulated: str) -> None:
    # A lone backslash leaves only whitespace behind
    command = accumulated.strip()
    if command:
        commands.append(command)


def extract_commands(content: str) -> list[str]:
    """
    Extract commands from a code block.

    A continued line keeps the space before its backslash and gains one
    more, so ``cargo build \\`` followed by ``--release`` becomes
    ``cargo build  --release``. Comment and blank lines met mid-continuation
    are skipped without ending the command.

    Args:
        content: Code block content

    Returns:
        Commands in source order
    """
    commands: list[str] = []
    current = ""
    state = _State.IDLE

    for line in block_lines(content):
        trimmed = line.strip()

        # Separators need no flush: IDLE never holds a partial command
        if not trimmed or trimmed.startswith("#"):
            continue

        fragment = _strip_prompt(trimmed)

        if fragment.endswith(CONTINUATION):
            current += fragment[:-1] + " "
            state = _State.ACCUMULATING
        elif state is _State.ACCUMULATING:
            current += fragment
            _emit(commands, current)
            current = ""
            state = _State.IDLE
        else:
            commands.append(fragment)

    # Block ended mid-continuation
    if current:
        _emit(commands, current)

    return commands
