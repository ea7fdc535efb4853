"""
Structured outcomes of session operations and command validation.

Every non-fatal failure below the command router surfaces as a Report
instead of an exception.
"""

from enum import Enum
from typing import NamedTuple


class Outcome(Enum):
    OK = "ok"
    NOOP = "noop"
    INVALID_INDEX = "invalid_index"
    MISSING_ARGUMENT = "missing_argument"
    VOLUME_PARSE_ERROR = "volume_parse_error"
    OUT_OF_RANGE = "out_of_range"
    ENGINE_ERROR = "engine_error"
    UNKNOWN_COMMAND = "unknown_command"


class Report(NamedTuple):
    """Result of one command: an outcome plus a user-facing message."""

    outcome: Outcome
    message: str = ""

    @property
    def is_error(self) -> bool:
        return self.outcome not in (Outcome.OK, Outcome.NOOP)


def ok(message: str = "") -> Report:
    return Report(Outcome.OK, message)


NOOP = Report(Outcome.NOOP)
