from smarthome.components.base import Device
from smarthome.components.light import Light
from smarthome.components.thermostat import Thermostat
from smarthome.components.security_camera import SecurityCamera

DEVICE_TYPES = {
    Light.kind: Light,
    Thermostat.kind: Thermostat,
    SecurityCamera.kind: SecurityCamera,
}


def create_device(kind, name):
    """Build a device of the given kind ('light', 'thermostat' or 'camera')"""
    try:
        device_cls = DEVICE_TYPES[kind]
    except KeyError:
        raise ValueError(
            f"Unknown device type '{kind}'. Allowed types: {', '.join(DEVICE_TYPES)}"
        ) from None
    return device_cls(name)


__all__ = [
    'Device',
    'Light',
    'Thermostat',
    'SecurityCamera',
    'DEVICE_TYPES',
    'create_device',
]
