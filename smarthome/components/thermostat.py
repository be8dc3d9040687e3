from smarthome.components.base import Device
from smarthome.outcome import Outcome, OutcomeKind


class Thermostat(Device):
    """Thermostat - target temperature can be changed whether or not it is on"""

    kind = 'thermostat'

    MIN_TEMP = 0
    MAX_TEMP = 40
    DEFAULT_TEMP = 20

    def __init__(self, name):
        super().__init__(name)
        self.temperature = self.DEFAULT_TEMP

    def adjust_setting(self, value):
        if not (self.MIN_TEMP <= value <= self.MAX_TEMP):
            return Outcome.failure(
                OutcomeKind.RANGE_ERROR,
                f"Temperature must be between {self.MIN_TEMP} and {self.MAX_TEMP} degrees Celsius"
            )
        self.temperature = value
        return Outcome.success(f"Temperature set to {value}°C")

    def get_status(self):
        return f"{super().get_status()} (Temperature: {self.temperature}°C)"

    def to_dict(self):
        data = super().to_dict()
        data['temperature'] = self.temperature
        return data
