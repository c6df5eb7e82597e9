# Руководство к файлу
# Назначение: CLI: чтение URL из STDIN, параметры конкурентности/таймаутов/логирования, запуск конвейера.
# Этап: базовая реализация. Обновляйте комментарий при изменениях.
# Коды выхода: 0 — прогон завершён (ошибки отдельных URL не влияют), 2 — ошибка конфигурации,
#   130 — прерывание с клавиатуры.

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

from titlextractor.core.config import MIB, TitleConfig
from titlextractor.core.errors import ConfigError
from titlextractor.core.logging import configure_logging
from titlextractor.orchestrator.pipeline import TitlePipeline


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="titlextractor",
        description="Читает URL из STDIN, загружает страницы и печатает их <title>",
    )
    p.add_argument("-c", "--concurrency", type=int, default=5, help="Число параллельных воркеров")
    p.add_argument("--max-line-bytes", type=int, default=MIB, help="Максимальная длина входной строки в байтах")
    p.add_argument("--request-timeout", type=float, default=12.0, help="Таймаут одного запроса, сек")
    p.add_argument("--connect-timeout", type=float, default=5.0, help="Таймаут установки соединения, сек")
    p.add_argument("--max-body-bytes", type=int, default=None, help="Предел чтения тела в поисках <title> (по умолчанию без предела)")
    p.add_argument("--color", action=argparse.BooleanOptionalAction, default=True, help="Цветной вывод")
    p.add_argument("--log-level", type=str, default="WARNING", help="Уровень логирования (DEBUG/INFO/WARN/ERROR)")
    p.add_argument("--log-json", action=argparse.BooleanOptionalAction, default=False, help="JSON-логирование")
    p.add_argument("--log-file", type=Path, default=None, help="Файл для логов (по умолчанию STDERR)")
    return p


def config_from_args(ns: argparse.Namespace) -> TitleConfig:
    return TitleConfig(
        worker_count=ns.concurrency,
        max_line_bytes=ns.max_line_bytes,
        request_timeout_sec=ns.request_timeout,
        connect_timeout_sec=ns.connect_timeout,
        max_body_bytes=ns.max_body_bytes,
        color=ns.color,
    )


async def main_async(cfg: TitleConfig) -> None:
    pipeline = TitlePipeline(cfg)
    await pipeline.run(sys.stdin.buffer)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    configure_logging(level=ns.log_level, to_file=str(ns.log_file) if ns.log_file else None, json=ns.log_json)
    try:
        cfg = config_from_args(ns)
    except ConfigError as e:
        # parser.error печатает usage в STDERR и выходит с кодом 2
        parser.error(str(e))
    try:
        asyncio.run(main_async(cfg))
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
