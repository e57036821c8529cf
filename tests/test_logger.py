import io
import json

import pytest

from hopgraph import NoopLogger, StdLogger


def test_text_format_and_level_filter():
    buf = io.StringIO()
    log = StdLogger(level="info", stream=buf)
    log.debug("hidden", n=1)
    log.info("run", n=4, m=3)
    assert buf.getvalue() == "info run n=4 m=3\n"


def test_json_format():
    buf = io.StringIO()
    log = StdLogger(level="debug", json_fmt=True, stream=buf)
    log.debug("pops", count=2)
    assert json.loads(buf.getvalue()) == {"level": "debug", "event": "pops", "count": 2}


def test_warning_level_is_silent_for_info():
    buf = io.StringIO()
    StdLogger(stream=buf).info("run")
    assert buf.getvalue() == ""


def test_unknown_level_rejected():
    with pytest.raises(ValueError):
        StdLogger(level="trace")


def test_noop_logger_accepts_events():
    log = NoopLogger()
    log.info("x", a=1)
    log.debug("y")


def test_warning_and_error_levels():
    buf = io.StringIO()
    log = StdLogger(level="error", stream=buf)
    log.warning("slow")
    log.error("failed", message="vertex 4 is missing")
    assert buf.getvalue() == "error failed message='vertex 4 is missing'\n"


def test_bound_context_comes_first():
    buf = io.StringIO()
    log = StdLogger(level="info", json_fmt=True, stream=buf).bind(command="stats")
    log.info("loaded", n=3)
    assert json.loads(buf.getvalue()) == {"level": "info", "event": "loaded", "command": "stats", "n": 3}
    assert list(json.loads(buf.getvalue())) == ["level", "event", "command", "n"]
