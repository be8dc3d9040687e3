"""Tests for HistoryLogger."""

from datetime import datetime

import pytest

from smarthome.history import HistoryLogger


class FakePublisher:
    def __init__(self):
        self.items = []

    def enqueue(self, item):
        self.items.append(item)


@pytest.fixture
def clock():
    ticks = iter(range(1, 10000))
    return lambda: datetime(2024, 1, 1, 0, 0, next(ticks) % 60)


class TestLogFile:
    """The log file is appended to and starts each session with a header."""

    def test_session_header(self, tmp_path):
        path = tmp_path / "log.txt"
        HistoryLogger(path).close()
        HistoryLogger(path).close()
        assert path.read_text(encoding='utf-8').count("=== New Session Started ===") == 2

    def test_unwritable_location_fails_at_startup(self, tmp_path):
        with pytest.raises(OSError):
            HistoryLogger(tmp_path / "missing" / "log.txt")

    def test_state_change_not_in_history(self, history):
        history.log_state_change("Lamp", "Turned ON")
        assert history.get_history() == []
        assert len(history) == 0


class TestHistory:
    """Bounded history, newest first on display, oldest first on save."""

    def test_newest_first(self, tmp_path, clock):
        logger = HistoryLogger(tmp_path / "log.txt", clock=clock)
        for cmd in ["a", "b", "c"]:
            logger.log_command(cmd)
        assert [e.split(" - ")[1] for e in logger.get_history()] == ["c", "b", "a"]
        assert [e.split(" - ")[1] for e in logger.get_history(2)] == ["c", "b"]
        assert len(logger.get_history(-1)) == 3
        assert logger.get_history(0) == []
        logger.close()

    def test_eviction(self, tmp_path):
        logger = HistoryLogger(tmp_path / "log.txt", max_history=3)
        for i in range(5):
            logger.log_command(f"cmd {i}")
        assert len(logger) == 3
        assert logger.get_history()[-1].endswith("cmd 2")
        logger.close()

    def test_default_capacity(self, history):
        for i in range(1005):
            history.log_command(str(i))
        assert len(history) == 1000
        assert history.get_history()[0].endswith(" - 1004")

    def test_save_to_file(self, history, tmp_path):
        history.log_command("on Lamp")
        history.log_command("off Lamp")
        target = tmp_path / "saved.txt"
        assert history.save_to_file(target) == 2
        assert target.read_text(encoding='utf-8') == (
            "=== Smart Home Command History ===\n\n"
            "2024-05-01 12:30:00 - on Lamp\n"
            "2024-05-01 12:30:00 - off Lamp\n"
        )

    def test_save_to_bad_path(self, history, tmp_path):
        with pytest.raises(OSError):
            history.save_to_file(tmp_path / "nope" / "saved.txt")


class TestPublishing:
    """Records are forwarded to the publisher when one is set."""

    def test_forwarding(self, history):
        publisher = FakePublisher()
        history.set_publisher(publisher)
        history.log_command("on Lamp")
        history.log_state_change("Lamp", "Turned ON")
        assert [(i['source'], i['device'], i['value']) for i in publisher.items] == [
            ('command', None, 'on Lamp'),
            ('state', 'Lamp', 'Turned ON'),
        ]


class BrokenFile:
    closed = False

    def write(self, text):
        raise OSError("disk full")

    def flush(self):
        pass

    def close(self):
        self.closed = True


class TestWriteFailure:
    """A log file that stops accepting writes does not stop the session."""

    def test_commands_keep_running(self, controller, history, capsys):
        history._file = BrokenFile()
        outcome = controller.execute_command("on Living Room Light")
        assert outcome.ok
        assert controller.registry.find_by_name("Living Room Light").is_on
        assert "[ERROR] Unable to write log file" in capsys.readouterr().out

    def test_history_still_recorded(self, controller, history, capsys):
        history._file = BrokenFile()
        controller.execute_command("on Nowhere")
        controller.execute_command("status Main Thermostat")
        assert len(controller.get_history()) == 2
        assert capsys.readouterr().out.count("[ERROR] Unable to write log file") == 1
