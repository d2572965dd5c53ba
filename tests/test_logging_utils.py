import logging

from merobase.utils.logging_utils import configure_logging


def test_configure_logging_writes_file(tmp_path):
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    log_file = tmp_path / "logs" / "merobase.log"
    try:
        configure_logging(debug=True, log_file=log_file)
        assert root.level == logging.DEBUG
        logging.getLogger("merobase.core.store").debug("Registered sample A12-3")
        for h in root.handlers:
            h.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "[DEBUG][merobase.core.store]\tRegistered sample A12-3" in text
    finally:
        for h in root.handlers:
            if h not in saved_handlers:
                h.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
