"""Tests for the log module."""

import io
import re

from playground import log

LINE = re.compile(r"^\d\d:\d\d:\d\d (?P<level>[A-Z]{3}) (?P<rest>.*)$")


def _lines(buffer: io.StringIO) -> list[str]:
    return [line for line in buffer.getvalue().splitlines() if line]


class TestConfigure:
    """Tests for log.configure and the line format."""

    def test_line_format(self):
        """Lines read 'HH:MM:SS LVL event key=value'."""
        buffer = io.StringIO()
        log.configure(level="INFO", stream=buffer)

        log.get_logger().info("view pushed", title="Form", depth=2)

        (line,) = _lines(buffer)
        match = LINE.match(line)
        assert match is not None
        assert match["level"] == "INF"
        assert match["rest"] == "view pushed title=Form depth=2"

    def test_values_with_spaces_are_quoted(self):
        buffer = io.StringIO()
        log.configure(stream=buffer)

        log.get_logger().warning("loaded", name="Rum and coke")

        assert _lines(buffer)[0].endswith('WRN loaded name="Rum and coke"')

    def test_level_filtering(self):
        """Debug lines are dropped at INFO."""
        buffer = io.StringIO()
        log.configure(level="INFO", stream=buffer)
        logger = log.get_logger()

        logger.debug("hidden")
        logger.error("shown")

        lines = _lines(buffer)
        assert len(lines) == 1
        assert " ERR shown" in lines[0]
        assert not log.is_debug_enabled()

    def test_debug_flag_overrides_level(self):
        buffer = io.StringIO()
        log.configure(level="WARNING", debug=True, stream=buffer)

        log.get_logger().debug("visible")

        assert log.is_debug_enabled()
        assert " DBG visible" in _lines(buffer)[0]

    def test_named_logger(self):
        buffer = io.StringIO()
        log.configure(stream=buffer)

        log.get_logger("model").info("ready")

        assert _lines(buffer)[0].endswith("INF ready logger=model")

    def test_name_key_is_rendered_as_logger(self):
        """The bound component name only ever shows up as logger=."""
        buffer = io.StringIO()
        log.configure(stream=buffer)

        log.get_logger("view").info("pushed", title="Form")

        line = _lines(buffer)[0]
        assert line.endswith("INF pushed logger=view title=Form")
        assert log.NAME_KEY not in line

    def test_module_logger_follows_reconfiguration(self):
        """Loggers created before configure() write where configure() says."""
        logger = log.get_logger("early")
        buffer = io.StringIO()
        log.configure(stream=buffer)

        logger.info("after")

        assert "INF after logger=early" in buffer.getvalue()


class TestModelLogging:
    """The model reports subscriptions at debug level."""

    def test_subscribe_and_set_are_logged(self, log_output):
        from playground.model import Mix

        mix = Mix()
        handle = mix.subscribe(lambda: None)
        mix.name = "Sour"
        handle.unsubscribe()

        output = log_output.getvalue()
        assert "DBG observer subscribed" in output
        assert "DBG field set logger=model record=Mix field=name observers=1" in output
        assert "DBG observer unsubscribed" in output
