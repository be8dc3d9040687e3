"""Optional MQTT mirror of history records"""

import json
import time

import paho.mqtt.client as mqtt


class MQTTBatchPublisher:
    """
    Batches history records and publishes them as one JSON message.

    A batch is flushed when it reaches max_batch items, when batch_interval
    seconds have passed since the last flush, or on stop(). Publishing is
    best-effort: a broker that cannot be reached disables the mirror.
    """

    def __init__(self, config, home_info):
        self.config = config or {}
        self.home_info = home_info or {}
        self.enabled = bool(self.config.get('enabled', False))
        self.topic = self.config.get('topic', 'smarthome/history')
        self.qos = int(self.config.get('qos', 1))
        self.batch_interval = float(self.config.get('batch_interval', 2.0))
        self.max_batch = int(self.config.get('max_batch', 50))
        self._client = None
        self._batch = []
        self._last_flush = time.monotonic()

    def start(self):
        if not self.enabled:
            return
        host = self.config.get('host', 'localhost')
        port = int(self.config.get('port', 1883))
        username = self.config.get('username')
        password = self.config.get('password')

        client = mqtt.Client(mqtt.CallbackAPIVersion.VERSION2)
        if username:
            client.username_pw_set(username, password)

        try:
            client.connect(host, port, 60)
        except (OSError, ValueError) as exc:
            print(f"[MQTT] Connection failed: {exc}")
            self.enabled = False
            return

        client.loop_start()
        self._client = client
        self._last_flush = time.monotonic()

    def enqueue(self, item):
        if not self.enabled or self._client is None:
            return
        self._batch.append(item)
        if len(self._batch) >= self.max_batch:
            self.flush()
        elif time.monotonic() - self._last_flush >= self.batch_interval:
            self.flush()

    def flush(self):
        if not self._batch or self._client is None:
            return
        payload = json.dumps({
            'home': self.home_info.get('id'),
            'batch': True,
            'items': self._batch,
        })
        self._client.publish(self.topic, payload, qos=self.qos)
        self._batch = []
        self._last_flush = time.monotonic()

    def stop(self):
        if self._client is None:
            return
        self.flush()
        self._client.loop_stop()
        self._client.disconnect()
        self._client = None
