import logging
import sys
from pathlib import Path
from typing import Union


LOG_NAME = "infohub"
LOG_FILE_NAME = "app.log"

LOG_FORMAT = logging.Formatter(
    "%(asctime)s | %(levelname)-8s | %(module)s:%(funcName)s:%(lineno)d | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)

logger = logging.getLogger(LOG_NAME)
logger.setLevel(logging.DEBUG)
logger.propagate = False

# До загрузки Settings пишем только в консоль
if not logger.handlers:
    _console = logging.StreamHandler(sys.stdout)
    _console.setLevel(logging.INFO)
    _console.setFormatter(LOG_FORMAT)
    logger.addHandler(_console)


def configure_logging(log_dir: Path, console_level: Union[str, int] = "INFO") -> Path:
    """
    Настраивает логгер по Settings: уровень консоли и файл <log_dir>/app.log (DEBUG).
    Повторный вызов заменяет файловый обработчик, а не добавляет второй.
    Возвращает путь к файлу лога.
    """
    level = logging.getLevelName(console_level.upper()) if isinstance(console_level, str) else console_level
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {console_level}")

    for handler in logger.handlers:
        if type(handler) is logging.StreamHandler:
            handler.setLevel(level)

    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = (log_dir / LOG_FILE_NAME).resolve()

    for handler in list(logger.handlers):
        if isinstance(handler, logging.FileHandler):
            if Path(handler.baseFilename).resolve() == log_file:
                return log_file
            logger.removeHandler(handler)
            handler.close()

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(LOG_FORMAT)
    logger.addHandler(file_handler)
    return log_file
