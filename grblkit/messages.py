"""Bracketed text reports: echo, help and feedback messages."""

from __future__ import annotations

from dataclasses import dataclass

_ECHO_PREFIX = "[echo:"
_HELP_PREFIX = "[HLP:"
_MESSAGE_PREFIX = "[MSG:"
_SUFFIX = "]"


def _is_wrapped(message: str, prefix: str) -> bool:
    return message.startswith(prefix) and message.endswith(_SUFFIX)


def _payload(message: str, prefix: str) -> str:
    return message.removeprefix(prefix).removesuffix(_SUFFIX)


@dataclass(frozen=True)
class EchoMessage:
    """The text echoed back by the device."""

    echo: str


@dataclass(frozen=True)
class HelpResponse:
    """The commands listed in a help report."""

    values: tuple[str, ...]


@dataclass(frozen=True)
class Message:
    """A feedback message from the device."""

    message: str


def parse_echo(message: str) -> EchoMessage:
    """Parse a message such as "[echo:Hello]"."""
    if not is_echo(message):
        raise ValueError(f'Cannot read echo "{message}"')
    return EchoMessage(_payload(message, _ECHO_PREFIX))


def is_echo(message: str) -> bool:
    """Tell whether ``message`` is wrapped in "[echo:" and "]"."""
    return _is_wrapped(message, _ECHO_PREFIX)


def parse_help(message: str) -> HelpResponse:
    """Parse a message such as "[HLP:$$ $# $G $I $N]"."""
    if not is_help(message):
        raise ValueError(f'Cannot read help message "{message}"')
    words = _payload(message, _HELP_PREFIX).split(" ")
    return HelpResponse(tuple(word for word in words if word))


def is_help(message: str) -> bool:
    """Tell whether ``message`` is wrapped in "[HLP:" and "]"."""
    return _is_wrapped(message, _HELP_PREFIX)


def parse_message(message: str) -> Message:
    """Parse a message such as "[MSG:Hello]"."""
    if not is_message(message):
        raise ValueError(f'Cannot read message "{message}"')
    return Message(_payload(message, _MESSAGE_PREFIX))


def is_message(message: str) -> bool:
    """Tell whether ``message`` is wrapped in "[MSG:" and "]"."""
    return _is_wrapped(message, _MESSAGE_PREFIX)