import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s][%(name)s]\t%(message)s"


def configure_logging(debug: bool = False, log_file: Optional[Path] = None) -> None:
    """Set up logging for an application embedding the sample engine.

    The engine's modules only create loggers; nothing is configured on import.

    Args:
        debug (bool, optional): If True, sets DEBUG level, otherwise INFO.
            Defaults to False.
        log_file (Path, optional): Also write log records to this file. Its
            parent directory is created if needed.
    """
    level = logging.DEBUG if debug else logging.INFO
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)
