"""Command dispatcher - resolves the target device and runs the action"""

from smarthome.outcome import Outcome, OutcomeKind


class CommandDispatcher:
    """
    Runs parsed commands against the registry.

    Never raises for user errors: every failure comes back as an Outcome
    and is recorded as an ERROR state change.
    """

    def __init__(self, registry, history):
        self.registry = registry
        self.history = history

    def dispatch(self, command):
        device = self.registry.find_by_name(command.device_name)
        if device is None:
            return self._fail(OutcomeKind.NOT_FOUND, f"Device not found: {command.device_name}")

        action = command.action

        if action == 'on':
            device.turn_on()
            self.history.log_state_change(device.name, "Turned ON")
            return Outcome.success(f"{device.name} turned ON")

        elif action == 'off':
            device.turn_off()
            self.history.log_state_change(device.name, "Turned OFF")
            return Outcome.success(f"{device.name} turned OFF")

        elif action == 'status':
            status = device.get_status()
            self.history.log_state_change(device.name, f"Status checked: {status}")
            return Outcome.success(status, value=status)

        elif action == 'set' and command.argument is not None:
            return self._adjust(device, command.argument)

        return self._fail(
            OutcomeKind.INVALID_ACTION,
            f"Invalid action or missing setting for: {action}"
        )

    def _adjust(self, device, value):
        outcome = device.adjust_setting(value)
        if outcome.kind is OutcomeKind.OK:
            self.history.log_state_change(device.name, f"Setting adjusted to {value}")
        elif outcome.kind is OutcomeKind.WARNING:
            self.history.log_state_change(device.name, f"Setting unchanged: {outcome.message}")
        else:
            self.record_error(outcome)
        return outcome

    def _fail(self, kind, message):
        outcome = Outcome.failure(kind, message)
        self.record_error(outcome)
        return outcome

    def record_error(self, outcome):
        self.history.log_state_change("ERROR", outcome.message)
