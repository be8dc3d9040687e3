"""Base device class for all simulated household devices"""

from smarthome.outcome import Outcome, OutcomeKind


class Device:
    """
    Base class for all devices.
    Holds the name and power state; variants layer their own setting on top.
    """

    kind = 'device'

    def __init__(self, name):
        self._name = name
        self.is_on = False

    @property
    def name(self):
        return self._name

    # ========== POWER ==========

    def turn_on(self):
        self.is_on = True

    def turn_off(self):
        self.is_on = False

    # ========== STATUS ==========

    def get_status(self):
        return f"{self._name} is {'on' if self.is_on else 'off'}"

    def to_dict(self):
        """Plain snapshot of the device state"""
        return {
            'name': self._name,
            'type': self.kind,
            'is_on': self.is_on,
        }

    # ========== SETTINGS ==========

    def adjust_setting(self, value):
        """Override in subclasses that have an adjustable setting"""
        return Outcome.failure(
            OutcomeKind.UNSUPPORTED,
            f"{self._name} does not support adjustable settings"
        )

    def __repr__(self):
        return f"{type(self).__name__}({self._name!r})"
