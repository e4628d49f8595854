import logging
from pathlib import Path
from typing import Optional
from pydantic import ValidationError
from pythonjsonlogger.json import JsonFormatter
from app.config import get_settings

LOG_FORMAT = '%(asctime)s %(name)s %(levelname)s %(message)s'

_configured = False

def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """Configure the root logger for structured JSON output."""
    global _configured
    root = logging.getLogger()
    root.setLevel(level.upper())
    if _configured:
        return root

    # create a json formatter for structured logging
    formatter = JsonFormatter(LOG_FORMAT)

    # Add console handler
    ch = logging.StreamHandler()
    ch.setFormatter(formatter)
    root.addHandler(ch)

    # Add file handler
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(path)
        fh.setFormatter(formatter)
        root.addHandler(fh)

    _configured = True
    return root

def setup_logging_from_settings() -> logging.Logger:
    """Configure logging from ``LOG_LEVEL`` and ``LOG_FILE_PATH``.

    Falls back to the defaults when the settings do not validate; the
    handler reports that case to the caller on its own.
    """
    try:
        settings = get_settings()
    except ValidationError:
        root = setup_logging()
        root.warning("Invalid settings, logging with defaults")
        return root
    return setup_logging(settings.LOG_LEVEL, settings.LOG_FILE_PATH)
