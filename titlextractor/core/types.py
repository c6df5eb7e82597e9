# Руководство к файлу
# Назначение: общие типы/DTO (заголовок страницы, результат обработки URL).
# Этап: базовая реализация DTO. Обновляйте комментарий при изменениях.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional


MISSING_TITLE = "<title> tag missing"


@dataclass(frozen=True)
class Title:
    """Извлечённый заголовок.

    degraded=True означает, что вместо заголовка лежит описание ошибки чтения тела
    ответа. Выводится так же, как обычный заголовок.
    """

    text: str
    degraded: bool = False


@dataclass(frozen=True)
class Result:
    """Результат обработки одного URL: либо заголовок, либо ошибка."""

    url: str
    status: int = 0
    title: Optional[Title] = None
    error: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.title is None) == (self.error is None):
            raise ValueError(f"result for {self.url!r} must carry exactly one of title/error")

    @classmethod
    def success(cls, url: str, status: int, title: Title) -> "Result":
        return cls(url=url, status=status, title=title)

    @classmethod
    def failure(cls, url: str, error: str) -> "Result":
        return cls(url=url, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class RunStats:
    """Итоги одного прогона конвейера."""

    queued: int = 0
    processed: int = 0
    errors: int = 0
    by_category: Dict[str, int] = field(default_factory=dict)
    input_error: Optional[str] = None
