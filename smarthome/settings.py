import json
import os

DEFAULT_SETTINGS = {
    'home': {'id': 'HOME1', 'name': 'Smart Home'},
    'devices': [
        {'name': 'Living Room Light', 'type': 'light'},
        {'name': 'Main Thermostat', 'type': 'thermostat'},
        {'name': 'Front Door Camera', 'type': 'camera'},
    ],
    'log': {'file': 'smart_home_log.txt', 'max_history': 1000},
    'mqtt': {'enabled': False},
}


def load_settings(filePath=None):
    """Load settings.json; relative paths resolve against the package directory"""
    if filePath is None:
        filePath = os.environ.get('SMARTHOME_SETTINGS', 'settings.json')
    if not os.path.isabs(filePath):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        filePath = os.path.join(base_dir, filePath)
    with open(filePath, 'r', encoding='utf-8') as f:
        settings = json.load(f)
    for key, default in DEFAULT_SETTINGS.items():
        if isinstance(default, dict):
            settings[key] = {**default, **settings.get(key, {})}
        else:
            settings.setdefault(key, [dict(item) for item in default])
    return settings
