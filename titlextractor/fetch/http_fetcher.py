# Руководство к файлу
# Назначение: HTTP-загрузчик на aiohttp.ClientSession (keep-alive, редиректы, TLS без проверки)
#   и извлечение заголовка из тела ответа.
# Этап: базовая реализация на aiohttp. Обновляйте комментарий при изменениях.
# Важно: одна сессия на запуск, общая для всех воркеров; после start() не меняется.

from __future__ import annotations

from typing import Optional
import logging

import aiohttp

from titlextractor.core.config import TitleConfig
from titlextractor.core.errors import describe_error
from titlextractor.core.types import Result
from titlextractor.parse.title_extractor import TitleExtractor
from titlextractor.utils.mime import parse_content_type


class HttpFetcher:
    """HTTP-загрузчик на базе aiohttp.ClientSession: одна попытка на URL, без ретраев."""

    def __init__(self, cfg: TitleConfig) -> None:
        self._cfg = cfg
        self._session: Optional[aiohttp.ClientSession] = None
        # собственный таймаут запроса, не зависящий от таймаута клиента
        self._request_timeout = aiohttp.ClientTimeout(
            total=cfg.request_timeout_sec,
            connect=cfg.connect_timeout_sec,
        )
        self._log = logging.getLogger(__name__)

    @property
    def started(self) -> bool:
        return self._session is not None

    async def start(self) -> None:
        if self._session is not None:
            return
        connector = aiohttp.TCPConnector(
            ssl=self._cfg.verify_tls,
            keepalive_timeout=self._cfg.keepalive_sec,
            limit=self._cfg.worker_count,
        )
        timeout = aiohttp.ClientTimeout(
            total=self._cfg.client_timeout_sec,
            connect=self._cfg.connect_timeout_sec,
        )
        headers = {
            "User-Agent": self._cfg.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        }
        self._session = aiohttp.ClientSession(
            connector=connector,
            timeout=timeout,
            headers=headers,
            raise_for_status=False,
        )
        self._log.debug("http session started workers=%d", self._cfg.worker_count)

    async def stop(self) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> "HttpFetcher":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.stop()

    async def fetch(self, url: str) -> Result:
        assert self._session is not None, "HttpFetcher.start() must be called first"
        try:
            async with self._session.get(url, allow_redirects=True, timeout=self._request_timeout) as resp:
                status = resp.status
                _, charset = parse_content_type(resp.headers.get("Content-Type"))
                title = await TitleExtractor.extract(resp.content, charset, max_bytes=self._cfg.max_body_bytes)
        except Exception as e:
            # Таймаут, сетевая ошибка или некорректный URL: одна запись об ошибке, без повторов.
            self._log.debug("http-fetch-failed url=%s err=%r", url, e)
            return Result.failure(url, describe_error(e))
        if title.degraded:
            self._log.debug("title-read-failed url=%s err=%s", url, title.text)
        return Result.success(url, status, title)
