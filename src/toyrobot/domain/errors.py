"""Exception taxonomy for the simulator.

Recoverable, per-line problems derive from :class:`CommandError`; the run
loop reports them and moves on to the next line.  :class:`StartupError`
aborts the whole run.  :class:`InvariantViolation` marks a programming
defect and is never caught by the run loop.

A constraint rejection is not an exception: it is a normal negative
answer surfaced as a ``rejected`` result.
"""

from __future__ import annotations


class RobotError(Exception):
    """Base class for all toyrobot errors."""


class StartupError(RobotError):
    """A named input file could not be opened."""


class CommandError(RobotError):
    """A single command line could not be carried out."""

    code = "COMMAND_ERROR"


class ParseError(CommandError):
    """Unknown verb or malformed arguments."""

    code = "PARSE_ERROR"


class InvalidDirectionError(ParseError):
    """A direction token was not recognised where one was required."""

    code = "INVALID_DIRECTION"

    def __init__(self, token: str, verb: str) -> None:
        super().__init__(f"Invalid direction {token!r} for {verb}")
        self.token = token
        self.verb = verb


class UnsupportedCommandError(CommandError):
    """A targeted entity does not respond to the verb."""

    code = "UNSUPPORTED"


class RegistrationError(CommandError):
    """An entity could not be registered, e.g. its name is already taken."""

    code = "REGISTRATION_ERROR"


class InvariantViolation(RobotError):
    """Internal state that should be impossible, e.g. rotating an unplaced facing."""
