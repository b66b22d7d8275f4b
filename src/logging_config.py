import logging
import logging.handlers
from pathlib import Path

LOG_FILE_NAME = "wine_scoring.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(log_level: str = "INFO", log_dir: Path | None = None) -> None:
    """Configure root logging for the wine scoring engine.

    Library modules only create loggers; this is the one place handlers are
    attached. Calling it again is a no-op once the rotating file handler is
    in place.

    Args:
        log_level: Console level name (e.g. ``"DEBUG"``). The log file
            always records DEBUG.
        log_dir: Directory for ``wine_scoring.log``. Defaults to ``logs/``
            at the repository root.
    """
    root_logger = logging.getLogger()
    if any(isinstance(h, logging.handlers.RotatingFileHandler) for h in root_logger.handlers):
        return  # Already configured

    if log_dir is None:
        log_dir = Path(__file__).parent.parent / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)

    level = getattr(logging, log_level.upper(), logging.INFO)
    root_logger.setLevel(logging.DEBUG)

    # 5MB per file, 3 backups
    file_handler = logging.handlers.RotatingFileHandler(
        log_dir / LOG_FILE_NAME, maxBytes=5 * 1024 * 1024, backupCount=3
    )
    file_handler.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    for handler in (file_handler, console_handler):
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    logging.getLogger(__name__).info("Logging initialized (level=%s, dir=%s)", log_level, log_dir)
