"""History logger - session log file plus bounded in-memory command history"""

import time
from collections import deque
from datetime import datetime

TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'
DEFAULT_MAX_HISTORY = 1000


class HistoryLogger:
    """
    Records commands and state changes.

    Every record is appended to the log file. Commands are also kept in an
    in-memory history capped at max_history entries (oldest dropped first).
    Opening the log file happens here, so a missing or read-only log location
    fails at startup.
    """

    def __init__(self, log_file, max_history=DEFAULT_MAX_HISTORY, publisher=None, clock=None):
        self.log_file = log_file
        self.max_history = int(max_history)
        self._history = deque(maxlen=self.max_history)
        self._publisher = publisher
        self._clock = clock or datetime.now
        self._write_failed = False
        self._file = open(log_file, 'a', encoding='utf-8')
        self._write("\n=== New Session Started ===")

    def set_publisher(self, publisher):
        """Set or replace the MQTT publisher"""
        self._publisher = publisher

    # ========== RECORDING ==========

    def log_command(self, command):
        timestamp = self._timestamp()
        self._write(f"{timestamp} - Command: {command}")
        self._history.append(f"{timestamp} - {command}")
        self._publish('command', None, command)

    def log_state_change(self, device_name, description):
        timestamp = self._timestamp()
        self._write(f"{timestamp} - State Change: {device_name} - {description}")
        self._publish('state', device_name, description)

    # ========== HISTORY ==========

    def get_history(self, limit=None):
        """Most recent entries first; limit None or negative returns everything"""
        entries = list(reversed(self._history))
        if limit is None or limit < 0:
            return entries
        return entries[:limit]

    def save_to_file(self, filename):
        """Write the history, oldest first. OSError propagates to the caller."""
        with open(filename, 'w', encoding='utf-8') as f:
            f.write("=== Smart Home Command History ===\n\n")
            for entry in self._history:
                f.write(entry + "\n")
        return len(self._history)

    def __len__(self):
        return len(self._history)

    # ========== INTERNAL ==========

    def _timestamp(self):
        return self._clock().strftime(TIMESTAMP_FORMAT)

    def _write(self, line):
        if self._write_failed:
            return
        try:
            self._file.write(line + "\n")
            self._file.flush()
        except OSError as e:
            # later records still reach the in-memory history and the publisher
            print(f"[ERROR] Unable to write log file, file logging disabled: {e}")
            self._write_failed = True

    def _publish(self, source, device_name, text):
        if self._publisher is None:
            return
        self._publisher.enqueue({
            'source': source,
            'device': device_name,
            'value': text,
            'ts': time.time(),
        })

    def close(self):
        if self._file.closed:
            return
        try:
            self._file.close()
        except OSError as e:
            print(f"[ERROR] Unable to close log file: {e}")
