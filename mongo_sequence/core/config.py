# mongo_sequence/core/config.py
import os
import sys
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

try:
    project_root = Path(__file__).resolve().parent.parent.parent
    dotenv_path = project_root / '.env'
except Exception as e:
    logger.error(f"Error calculating project root/dotenv path: {e}", exc_info=True)
    dotenv_path = Path(".env")

# Environment variables already set win over the .env file
if dotenv_path.is_file():
    logger.debug(f"Loading environment variables from: {dotenv_path}")
    load_dotenv(dotenv_path=dotenv_path, override=False)
else:
    logger.debug(f".env file not found at {dotenv_path}. Relying on system environment variables.")


class InterceptHandler(logging.Handler):
    """Routes standard library log records (pymongo, motor, our own modules) into Loguru."""
    def emit(self, record: logging.LogRecord) -> None:
        try: level = logger.level(record.levelname).name
        except ValueError: level = record.levelno
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1
        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(level: Optional[str] = None):
    """Configure Loguru for scripts and applications using mongo_sequence.

    The library never calls this itself; importing the package leaves the
    host application's logging untouched.
    """
    log_level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    log_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
    )

    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level_name,
        format=log_format,
        colorize=True,
    )
    logger.enable("mongo_sequence")

    # Level 0 on the root logger so every record reaches the handler; Loguru filters
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in ("pymongo", "motor"):
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.info(f"Logging level set to: {log_level_name}")


# --- Sequence defaults ---
DEFAULT_COLLECTION_NAME: str = os.getenv("SEQUENCE_COLLECTION", "sequences")
DEFAULT_SEQUENCE_NAME: str = os.getenv("SEQUENCE_DEFAULT_NAME", "defaultSeq")

try:
    DEFAULT_TIMEOUT: float = float(os.getenv("SEQUENCE_TIMEOUT", "3"))
    if DEFAULT_TIMEOUT <= 0:
        raise ValueError(DEFAULT_TIMEOUT)
except ValueError:
    logger.warning("Invalid SEQUENCE_TIMEOUT. Using default: 3 seconds.")
    DEFAULT_TIMEOUT = 3.0

# --- Database Configuration (connect_db and example scripts only) ---
MONGODB_URL: str = os.getenv("MONGODB_URL", "mongodb://localhost:27017")

_default_db_name = "sequence_db"
try:
    path_part = MONGODB_URL.split('://', 1)[-1].split('/', 1)[1].split('?')[0]
    if path_part: _default_db_name = path_part
except IndexError: pass
DATABASE_NAME: str = os.getenv("DATABASE_NAME", _default_db_name)

logger.debug(f"Sequence collection: {DEFAULT_COLLECTION_NAME}, timeout: {DEFAULT_TIMEOUT}s")
logger.debug(f"Database Name: {DATABASE_NAME}")
