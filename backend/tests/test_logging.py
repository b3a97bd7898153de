import json, logging
from codepad.core.logging import JsonFormatter


def make_record(**extra):
    record = logging.LogRecord(
        "codepad.services.judge0", logging.INFO, __file__, 1, "Poll attempt %d", (2,), None
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_line_has_base_fields():
    line = json.loads(JsonFormatter().format(make_record()))
    assert line["level"] == "INFO"
    assert line["msg"] == "Poll attempt 2"
    assert line["logger"] == "codepad.services.judge0"
    assert "token" not in line


def test_run_context_is_copied():
    line = json.loads(
        JsonFormatter().format(make_record(token="tok-1", attempt=2, status_id=1))
    )
    assert line["token"] == "tok-1"
    assert line["attempt"] == 2
    assert line["status_id"] == 1
