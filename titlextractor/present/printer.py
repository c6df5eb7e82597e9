# Руководство к файлу
# Назначение: вывод результатов: категория по HTTP-статусу, цветная строка, потоковая печать в STDOUT.
# Этап: базовая реализация. Обновляйте комментарий при изменениях.
# Важно: порядок вывода — порядок завершения, а не порядок входа.

from __future__ import annotations

import enum
import sys
from typing import Dict, Optional, TextIO

from titlextractor.core.types import Result, RunStats
from titlextractor.frontier.queue import ClosableQueue


COLOR_RESET = "\033[0m"
COLOR_GREEN = "\033[32m"
COLOR_YELLOW = "\033[33m"
COLOR_ORANGE = "\033[33;1m"
COLOR_MAGENTA = "\033[35m"


class StatusCategory(str, enum.Enum):
    SUCCESS = "success"
    REDIRECT = "redirect"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    OTHER = "other"


CATEGORY_COLORS: Dict[StatusCategory, str] = {
    StatusCategory.SUCCESS: COLOR_GREEN,
    StatusCategory.REDIRECT: COLOR_YELLOW,
    StatusCategory.CLIENT_ERROR: COLOR_ORANGE,
    StatusCategory.SERVER_ERROR: COLOR_MAGENTA,
    StatusCategory.OTHER: COLOR_RESET,
}


def category_for_status(status: int) -> StatusCategory:
    if 200 <= status < 300:
        return StatusCategory.SUCCESS
    if 300 <= status < 400:
        return StatusCategory.REDIRECT
    if 400 <= status < 500:
        return StatusCategory.CLIENT_ERROR
    if 500 <= status < 600:
        return StatusCategory.SERVER_ERROR
    return StatusCategory.OTHER


def format_result(result: Result, color: bool = True) -> str:
    """Одна строка вывода без перевода строки."""
    if result.error is not None:
        marker = COLOR_MAGENTA
        body = f"[Error] {result.url}: {result.error}"
    else:
        marker = CATEGORY_COLORS[category_for_status(result.status)]
        body = f"[{result.status}] {result.url}: {result.title.text}"
    if not color:
        return body
    return f"{marker}{body}{COLOR_RESET}"


class ResultPresenter:
    """Печатает результаты по мере поступления."""

    def __init__(self, out: Optional[TextIO] = None, color: bool = True) -> None:
        self._out = out if out is not None else sys.stdout
        self._color = color

    def emit(self, result: Result) -> None:
        self._out.write(format_result(result, self._color) + "\n")
        self._out.flush()

    async def drain(self, results: ClosableQueue[Result], stats: Optional[RunStats] = None) -> RunStats:
        """Читает очередь результатов до её закрытия."""
        stats = stats if stats is not None else RunStats()
        async for result in results:
            self.emit(result)
            stats.processed += 1
            if result.error is not None:
                stats.errors += 1
                continue
            key = category_for_status(result.status).value
            stats.by_category[key] = stats.by_category.get(key, 0) + 1
        return stats
