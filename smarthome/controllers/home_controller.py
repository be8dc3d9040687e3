"""Smart home session - owns the registry, history and dispatcher"""

from smarthome.commands import parse_command
from smarthome.components import create_device
from smarthome.controllers.dispatcher import CommandDispatcher
from smarthome.history import HistoryLogger
from smarthome.mqtt_publisher import MQTTBatchPublisher
from smarthome.outcome import Outcome
from smarthome.registry import DeviceRegistry


class SmartHomeController:
    """Controller for one simulator session"""

    def __init__(self, settings, history=None):
        self.settings = settings
        self.registry = DeviceRegistry()
        self.publisher = MQTTBatchPublisher(settings.get('mqtt', {}), settings.get('home', {}))

        if history is None:
            log_settings = settings.get('log', {})
            history = HistoryLogger(
                log_settings.get('file', 'smart_home_log.txt'),
                log_settings.get('max_history', 1000),
            )
        self.history = history
        self.history.set_publisher(self.publisher)

        self.dispatcher = CommandDispatcher(self.registry, self.history)
        try:
            self._init_devices()
        except ValueError:
            self.history.close()
            raise

    def _init_devices(self):
        for spec in self.settings.get('devices', []):
            try:
                kind, name = spec['type'], spec['name']
            except (KeyError, TypeError):
                raise ValueError(f"Device entry needs 'name' and 'type': {spec!r}") from None
            self.add_device(kind, name)

    # ========== LIFECYCLE ==========

    def start(self):
        self.publisher.start()

    def cleanup(self):
        """Flush the MQTT mirror and close the log file"""
        self.publisher.stop()
        self.history.close()

    # ========== DEVICES ==========

    def add_device(self, kind, name):
        """Create and register a device. Raises ValueError for bad kind or name."""
        device = self.registry.add(create_device(kind, name))
        self.history.log_state_change(device.name, "Device added")
        return device

    def list_devices(self):
        return self.registry.list()

    def get_status(self):
        """Status line of every device, in registry order"""
        return [device.get_status() for device in self.registry]

    # ========== COMMANDS ==========

    def execute_command(self, line):
        """Record, parse and dispatch one line of input"""
        self.history.log_command(line)

        parsed = parse_command(line)
        if isinstance(parsed, Outcome):
            self.dispatcher.record_error(parsed)
            return parsed

        return self.dispatcher.dispatch(parsed)

    # ========== HISTORY ==========

    def get_history(self, limit=None):
        return self.history.get_history(limit)

    def save_history(self, filename):
        return self.history.save_to_file(filename)
