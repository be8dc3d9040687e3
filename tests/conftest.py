from datetime import datetime

import pytest

from smarthome.controllers import SmartHomeController
from smarthome.history import HistoryLogger

FIXED_TIME = datetime(2024, 5, 1, 12, 30, 0)


@pytest.fixture
def settings(tmp_path):
    return {
        'home': {'id': 'TEST'},
        'devices': [
            {'name': 'Living Room Light', 'type': 'light'},
            {'name': 'Main Thermostat', 'type': 'thermostat'},
            {'name': 'Front Door Camera', 'type': 'camera'},
        ],
        'log': {'file': str(tmp_path / 'smart_home_log.txt'), 'max_history': 1000},
        'mqtt': {'enabled': False},
    }


@pytest.fixture
def history(tmp_path):
    logger = HistoryLogger(tmp_path / 'log.txt', clock=lambda: FIXED_TIME)
    yield logger
    logger.close()


@pytest.fixture
def controller(settings, history):
    ctrl = SmartHomeController(settings, history=history)
    yield ctrl
    ctrl.cleanup()
