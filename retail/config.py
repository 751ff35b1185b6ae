import logging
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Settings:
    """
    Настройки запуска. Передаются явно в точку входа,
    глобального состояния и переменных окружения нет
    """

    log_level: int = logging.WARNING
    log_dir: Optional[str] = None
    wait_for_input: bool = True
