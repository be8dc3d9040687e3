"""Device registry - ordered, name-indexed collection of devices"""


class DeviceRegistry:
    """
    Keeps devices in insertion order.
    Lookup is a linear, case-sensitive exact match on the device name.
    """

    def __init__(self, devices=None):
        self._devices = []
        for device in devices or ():
            self.add(device)

    def add(self, device):
        """
        Append a device. Names must be non-empty and unique, and must be
        reachable by the parser: no angle brackets, no leading space.
        """
        if not device.name:
            raise ValueError("Device name must not be empty")
        if "<" in device.name or ">" in device.name:
            raise ValueError(f"Device name '{device.name}' must not contain '<' or '>'")
        if device.name.startswith(" "):
            raise ValueError(f"Device name '{device.name}' must not start with a space")
        if self.find_by_name(device.name) is not None:
            raise ValueError(f"Device '{device.name}' already exists")
        self._devices.append(device)
        return device

    def find_by_name(self, name):
        for device in self._devices:
            if device.name == name:
                return device
        return None

    def names(self):
        return [device.name for device in self._devices]

    def list(self):
        """Device names in insertion order"""
        return self.names()

    def __iter__(self):
        return iter(self._devices)

    def __len__(self):
        return len(self._devices)

    def __contains__(self, name):
        return self.find_by_name(name) is not None
