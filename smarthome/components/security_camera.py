from smarthome.components.base import Device


class SecurityCamera(Device):
    """Security camera - records while on, has no adjustable setting"""

    kind = 'camera'

    def is_recording(self):
        return self.is_on

    def get_status(self):
        return super().get_status() + (" (Recording)" if self.is_on else " (Not Recording)")

    def to_dict(self):
        data = super().to_dict()
        data['recording'] = self.is_recording()
        return data
