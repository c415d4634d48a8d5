"""Command prefix matching."""

from typing import Optional

from groq_bridge.domain.models import Command, CommandRequest


def parse_command(content: str) -> Optional[CommandRequest]:
    """Match ``content`` against the command prefixes.

    Prefixes are tried in ``Command`` declaration order and the first match
    wins. The prefix and at most one following space are removed; the rest
    is kept verbatim, including an empty string.

    Returns:
        The matched request, or None for ordinary conversation.
    """
    for command in Command:
        if content.startswith(command.prefix):
            argument = content[len(command.prefix):]
            if argument.startswith(" "):
                argument = argument[1:]
            return CommandRequest(command=command, argument=argument)
    return None
