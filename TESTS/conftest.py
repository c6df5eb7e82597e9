# Руководство к файлу (TESTS/conftest.py)
# Назначение:
# - Общие фикстуры для pytest-тестов titlextractor.
# - Локальный HTTP-сервер на aiohttp (без реальной сети) и фейковый загрузчик для конвейера.

from __future__ import annotations

import asyncio
from typing import List

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from titlextractor.core.types import Result, Title


async def _hello(request: web.Request) -> web.Response:
    return web.Response(
        text="<html><head><title>Hello   World</title></head><body>hi</body></html>",
        content_type="text/html",
    )


async def _no_title(request: web.Request) -> web.Response:
    return web.Response(text="<html><body><p>no title here</p></body></html>", content_type="text/html")


async def _cyrillic(request: web.Request) -> web.Response:
    body = "<html><head><title>Привет, мир</title></head></html>".encode("cp1251")
    return web.Response(body=body, headers={"Content-Type": "text/html; charset=windows-1251"})


async def _not_found(request: web.Request) -> web.Response:
    return web.Response(status=404, text="<title>Not Found</title>", content_type="text/html")


async def _server_error(request: web.Request) -> web.Response:
    return web.Response(status=500, text="<title>Oops</title>", content_type="text/html")


async def _redirect(request: web.Request) -> web.Response:
    raise web.HTTPFound("/hello")


async def _slow(request: web.Request) -> web.Response:
    await asyncio.sleep(1.5)
    return web.Response(text="<title>Too late</title>", content_type="text/html")


async def _slow_tail(request: web.Request) -> web.StreamResponse:
    # заголовок приходит сразу, остаток тела — с задержкой
    resp = web.StreamResponse(headers={"Content-Type": "text/html"})
    await resp.prepare(request)
    await resp.write(b"<html><head><title>Early bird</title></head><body>")
    await asyncio.sleep(1.5)
    await resp.write(b"</body></html>")
    return resp


def build_site() -> web.Application:
    app = web.Application()
    app.router.add_get("/hello", _hello)
    app.router.add_get("/no-title", _no_title)
    app.router.add_get("/cyrillic", _cyrillic)
    app.router.add_get("/missing", _not_found)
    app.router.add_get("/boom", _server_error)
    app.router.add_get("/redirect", _redirect)
    app.router.add_get("/slow", _slow)
    app.router.add_get("/slow-tail", _slow_tail)
    return app


@pytest_asyncio.fixture
async def site():
    """Поднимает локальный HTTP-сервер с набором тестовых страниц."""

    server = TestServer(build_site())
    await server.start_server()
    try:
        yield server
    finally:
        await server.close()


class FakeFetcher:
    """Загрузчик без сети: URL с 'bad' дают ошибку, остальные — заголовок и 200."""

    def __init__(self, delay: float = 0.0) -> None:
        self.delay = delay
        self.calls: List[str] = []
        self.in_flight = 0
        self.max_in_flight = 0
        self.started = False
        self.start_count = 0
        self.stop_count = 0

    async def start(self) -> None:
        self.started = True
        self.start_count += 1

    async def stop(self) -> None:
        self.started = False
        self.stop_count += 1

    async def fetch(self, url: str) -> Result:
        self.calls.append(url)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
        finally:
            self.in_flight -= 1
        if "bad" in url:
            return Result.failure(url, f"dial tcp: lookup {url}: no such host")
        return Result.success(url, 200, Title(f"title of {url}"))


@pytest.fixture
def fake_fetcher() -> FakeFetcher:
    return FakeFetcher()

