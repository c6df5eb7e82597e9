# Руководство к файлу
# Назначение: оркестратор конвейера: источник URL -> N воркеров (загрузка + <title>) -> вывод.
# Этап: базовая реализация. Обновляйте комментарий при изменениях.
# Важно: очередь результатов закрывается ровно один раз, после завершения всех воркеров.

from __future__ import annotations

import asyncio
import logging
from typing import IO, List, Optional

from titlextractor.core.config import TitleConfig
from titlextractor.core.types import Result, RunStats
from titlextractor.fetch.http_fetcher import HttpFetcher
from titlextractor.frontier.queue import ClosableQueue
from titlextractor.frontier.url_source import UrlSource
from titlextractor.present.printer import ResultPresenter


__all__ = ["TitlePipeline", "RunStats"]


class TitlePipeline:
    """Конвейер загрузки страниц и извлечения заголовков."""

    def __init__(
        self,
        cfg: TitleConfig,
        fetcher: Optional[HttpFetcher] = None,
        presenter: Optional[ResultPresenter] = None,
    ) -> None:
        self.cfg = cfg
        self.log = logging.getLogger(__name__)
        self.fetcher = fetcher if fetcher is not None else HttpFetcher(cfg)
        self.presenter = presenter if presenter is not None else ResultPresenter(color=cfg.color)

    async def _worker(self, worker_id: int, urls: ClosableQueue[str], results: ClosableQueue[Result]) -> None:
        async for url in urls:
            self.log.debug(f"worker={worker_id} dequeue url={url}")
            res = await self.fetcher.fetch(url)
            self.log.debug(f"worker={worker_id} fetched status={res.status} url={url} ok={res.ok}")
            await results.put(res)
        self.log.debug(f"worker={worker_id} done")

    @staticmethod
    async def _close_when_done(workers: List[asyncio.Task], results: ClosableQueue[Result]) -> None:
        try:
            await asyncio.gather(*workers)
        finally:
            results.close()

    async def run(self, stream: IO) -> RunStats:
        """Обрабатывает весь входной поток и возвращает итоги прогона."""
        urls: ClosableQueue[str] = ClosableQueue(self.cfg.queue_capacity)
        results: ClosableQueue[Result] = ClosableQueue(self.cfg.queue_capacity)
        source = UrlSource(stream, urls, self.cfg.max_line_bytes)

        owns_fetcher = not self.fetcher.started
        await self.fetcher.start()

        tasks: List[asyncio.Task] = []
        try:
            source_task = asyncio.create_task(source.run())
            workers = [
                asyncio.create_task(self._worker(i, urls, results))
                for i in range(self.cfg.worker_count)
            ]
            watcher = asyncio.create_task(self._close_when_done(workers, results))
            tasks = [source_task, *workers, watcher]

            stats = await self.presenter.drain(results)
            await watcher
            stats.queued = await source_task
            stats.input_error = source.error
        finally:
            for t in tasks:
                if not t.done():
                    t.cancel()
            if owns_fetcher:
                await self.fetcher.stop()

        self.log.info(
            "done: queued=%d processed=%d errors=%d categories=%s",
            stats.queued,
            stats.processed,
            stats.errors,
            stats.by_category,
        )
        return stats
