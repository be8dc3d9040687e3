from smarthome.components.base import Device
from smarthome.outcome import Outcome, OutcomeKind


class Light(Device):
    """Dimmable light - brightness follows the power state"""

    kind = 'light'

    MIN_BRIGHTNESS = 0
    MAX_BRIGHTNESS = 100

    def __init__(self, name):
        super().__init__(name)
        self.brightness = self.MIN_BRIGHTNESS

    def turn_on(self):
        self.is_on = True
        self.brightness = self.MAX_BRIGHTNESS

    def turn_off(self):
        self.is_on = False
        self.brightness = self.MIN_BRIGHTNESS

    def adjust_setting(self, value):
        if not self.is_on:
            return Outcome.warning("Cannot adjust brightness while the light is off.")
        if not (self.MIN_BRIGHTNESS <= value <= self.MAX_BRIGHTNESS):
            return Outcome.failure(
                OutcomeKind.RANGE_ERROR,
                f"Brightness must be between {self.MIN_BRIGHTNESS} and {self.MAX_BRIGHTNESS}"
            )
        self.brightness = value
        return Outcome.success(f"Brightness set to {value}%")

    def get_status(self):
        return f"{super().get_status()} (Brightness: {self.brightness}%)"

    def to_dict(self):
        data = super().to_dict()
        data['brightness'] = self.brightness
        return data
