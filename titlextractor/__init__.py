# Руководство к файлу (titlextractor/__init__.py)
# Назначение:
# - Объявляет пакет titlextractor: конкурентная загрузка URL и извлечение <title>.
# - Экспортирует конфигурацию, типы результата и конвейер.

from __future__ import annotations

from titlextractor.core.config import TitleConfig
from titlextractor.core.errors import ConfigError, QueueClosedError, TitleExtractorError
from titlextractor.core.types import Result, Title
from titlextractor.orchestrator.pipeline import RunStats, TitlePipeline

__version__ = "0.1.0"

__all__ = [
    "TitleConfig",
    "ConfigError",
    "QueueClosedError",
    "TitleExtractorError",
    "Result",
    "Title",
    "RunStats",
    "TitlePipeline",
    "__version__",
]
