# retail/logging_config.py
# JSON-логирование: консоль в stderr (stdout остаётся под уведомления),
# опционально - ротируемый файл в log_dir

import json
import logging
import logging.handlers
import os
import sys
from datetime import datetime, timezone
from typing import Optional

LOG_FILENAME = "retail_orders.log"


class JsonFormatter(logging.Formatter):
    """Запись лога -> JSON-строка, поля из extra={"extra": {...}} поднимаются наверх"""

    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc)
            .isoformat()
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "module": record.module,
            "message": record.getMessage(),
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            log_record.update(extra)
        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log_record, default=str)


def configure_logging(level: int = logging.WARNING, log_dir: Optional[str] = None) -> None:
    """
    Настраивает корневой логгер.
    level - уровень логгера и обработчиков,
    log_dir - каталог для ротируемого файла (создаётся при необходимости)
    """
    logger = logging.getLogger()
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    formatter = JsonFormatter()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    if log_dir is not None:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            filename=os.path.join(log_dir, LOG_FILENAME),
            maxBytes=1024 * 1024,
            backupCount=3,
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        logger.addHandler(file_handler)
