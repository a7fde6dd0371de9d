import json
import logging

from floppy.logger import HumanFormatter, NdjsonFormatter, get_logger, setup_logging


def make_record(**extra):
    record = logging.LogRecord("floppy.game", logging.INFO, __file__, 1,
                               "Session ended with score %d", (3,), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_ndjson_includes_structured_data():
    line = NdjsonFormatter().format(make_record(data={"score": 3, "new_best": True}))
    entry = json.loads(line)
    assert entry["level"] == "info"
    assert entry["logger"] == "floppy.game"
    assert entry["msg"] == "Session ended with score 3"
    assert entry["data"] == {"score": 3, "new_best": True}


def test_ndjson_without_data():
    entry = json.loads(NdjsonFormatter().format(make_record()))
    assert "data" not in entry


def test_human_format_strips_namespace():
    line = HumanFormatter().format(make_record())
    assert "[I] game: Session ended with score 3" in line


def test_setup_logging_writes_ndjson_file(tmp_path):
    path = tmp_path / "floppy.log"
    setup_logging("debug", str(path))
    try:
        get_logger("test").debug("hello", extra={"data": {"n": 1}})
        for handler in logging.getLogger("floppy").handlers:
            handler.flush()
        entry = json.loads(path.read_text(encoding="utf-8").splitlines()[-1])
        assert entry["data"] == {"n": 1}
    finally:
        root = logging.getLogger("floppy")
        for handler in root.handlers:
            handler.close()
        root.handlers.clear()
        root.setLevel(logging.NOTSET)
