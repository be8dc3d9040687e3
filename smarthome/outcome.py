"""Result values returned by device operations and command dispatch"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class OutcomeKind(Enum):
    OK = 'ok'
    WARNING = 'warning'
    PARSE_ERROR = 'parse_error'
    NOT_FOUND = 'not_found'
    RANGE_ERROR = 'range_error'
    UNSUPPORTED = 'unsupported'
    INVALID_ACTION = 'invalid_action'


@dataclass
class Outcome:
    """Result of a single device operation or dispatched command."""
    kind: OutcomeKind
    message: str = ''
    value: Optional[str] = None

    @property
    def ok(self) -> bool:
        """True for OK and WARNING; a warning never changes state but is not a failure."""
        return self.kind in (OutcomeKind.OK, OutcomeKind.WARNING)

    @property
    def is_error(self) -> bool:
        return not self.ok

    @classmethod
    def success(cls, message='', value=None):
        return cls(OutcomeKind.OK, message, value)

    @classmethod
    def warning(cls, message):
        return cls(OutcomeKind.WARNING, message)

    @classmethod
    def failure(cls, kind, message):
        return cls(kind, message)
