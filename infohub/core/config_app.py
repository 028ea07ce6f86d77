import os
from pathlib import Path
from typing import Optional
from dotenv import find_dotenv, load_dotenv

from .config_log import configure_logging, logger


class Settings:
    """Конфигурация приложения, загруженная из переменных окружения."""

    PROJECT_NAME = "InfoHub"
    PROJECT_VERSION = "1.0.0"
    PROJECT_DESCRIPTION = "API-агрегатор: погода, конвертация валют и случайные цитаты"

    def __init__(self):
        if not load_dotenv(find_dotenv(usecwd=True)):
            logger.warning("Не найден .env файл, используются переменные окружения или значения по умолчанию")

        # Логирование
        self.LOG_DIR: Path = Path(os.getenv("LOG_DIR", "logs"))
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
        self.LOG_FILE: Path = configure_logging(self.LOG_DIR, self.LOG_LEVEL)

        # Сервер
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.PORT: int = int(os.getenv("PORT", "5000"))

        # CORS
        self.ALLOWED_ORIGINS: list = [
            origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",") if origin.strip()
        ]

        # OpenWeather API
        self.OPENWEATHER_API_KEY: Optional[str] = os.getenv("OPENWEATHER_API_KEY") or None
        self.OPENWEATHER_URL: str = os.getenv(
            "OPENWEATHER_URL", "https://api.openweathermap.org/data/2.5/weather"
        )

        # Курсы валют (Frankfurter)
        self.FRANKFURTER_URL: str = os.getenv("FRANKFURTER_URL", "https://api.frankfurter.app/latest")

        # Цитаты: основной и резервный источники
        self.QUOTABLE_URL: str = os.getenv("QUOTABLE_URL", "https://api.quotable.io/random")
        self.ZENQUOTES_URL: str = os.getenv("ZENQUOTES_URL", "https://zenquotes.io/api/random")

        # Таймауты внешних запросов, секунды
        self.UPSTREAM_TIMEOUT_SECONDS: float = float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "10"))
        self.QUOTE_TIMEOUT_SECONDS: float = float(os.getenv("QUOTE_TIMEOUT_SECONDS", "5"))

        # Валидация после инициализации
        self._validate_critical_settings()

    def _validate_critical_settings(self) -> None:
        """Проверяет критические настройки."""
        if self.UPSTREAM_TIMEOUT_SECONDS <= 0:
            logger.error("UPSTREAM_TIMEOUT_SECONDS должен быть положительным")
            raise ValueError("UPSTREAM_TIMEOUT_SECONDS must be positive")
        if self.QUOTE_TIMEOUT_SECONDS <= 0:
            logger.error("QUOTE_TIMEOUT_SECONDS должен быть положительным")
            raise ValueError("QUOTE_TIMEOUT_SECONDS must be positive")
        if not self.OPENWEATHER_API_KEY:
            logger.warning("OPENWEATHER_API_KEY не задан. Погодные функции будут недоступны.")


settings = Settings()
