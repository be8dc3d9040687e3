"""
Command parser.

Turns one line of user input into a Command:

  on <device>             turn a device on
  off <device>            turn a device off
  status <device>         report device status
  set <device> <value>    adjust the device setting

The device name may contain spaces. For 'set' the value is everything after
the last space on the line.
"""

import re
from dataclasses import dataclass
from typing import Optional

from smarthome.outcome import Outcome, OutcomeKind

ACTIONS = ('on', 'off', 'status', 'set')

_ACTION_RE = re.compile(r'\s*(\S*)(.*)\Z', re.DOTALL)
_NUMERIC_RE = re.compile(r'[0-9]+')


@dataclass
class Command:
    """A parsed user instruction."""
    action: str
    device_name: str
    argument: Optional[int] = None
    raw: str = ''


def sanitize_device_name(name):
    """Strip angle brackets left over from '<device>' placeholders"""
    return name.replace('<', '').replace('>', '')


def is_numeric(text):
    """True for a non-empty run of ASCII digits"""
    return _NUMERIC_RE.fullmatch(text) is not None


def split_action(line):
    """Return (action, remainder) with leading spaces removed from the remainder"""
    action, remainder = _ACTION_RE.match(line).groups()
    return action, remainder.lstrip(' ')


def parse_command(line):
    """
    Parse a raw input line.

    Returns a Command, or a PARSE_ERROR Outcome when a 'set' value is not
    numeric. Unknown actions are passed through for the dispatcher to reject.
    """
    action, remainder = split_action(line)

    if action != 'set':
        return Command(action, sanitize_device_name(remainder), raw=line)

    pos = remainder.rfind(' ')
    if pos == -1:
        # no value given; the dispatcher reports it
        return Command(action, '', raw=line)

    device_name = sanitize_device_name(remainder[:pos])
    setting = remainder[pos + 1:]
    if not is_numeric(setting):
        return Outcome.failure(
            OutcomeKind.PARSE_ERROR,
            "Invalid setting value. Please provide a numeric value."
        )
    return Command(action, device_name, int(setting), raw=line)
