# Руководство к файлу
# Назначение: извлечение текста <title> из тела HTTP-ответа (парсер Selectolax, бэкенд Lexbor).
# Этап: базовая реализация. Обновляйте комментарий при изменениях.
# Важно: тело читается потоково до закрытого <title> или конца потока; max_bytes — необязательный предел.

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import aiohttp
from selectolax.lexbor import LexborHTMLParser

from titlextractor.core.errors import describe_error
from titlextractor.core.types import MISSING_TITLE, Title
from titlextractor.utils.mime import resolve_charset


log = logging.getLogger(__name__)

CHUNK_SIZE = 16 * 1024
_TITLE_END = b"</title"

# Ошибки потока тела, которые превращаются в "деградированный" заголовок
STREAM_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError, OSError, ValueError)


def normalize_whitespace(text: str) -> str:
    return " ".join(text.split())


class TitleExtractor:
    """Извлечение заголовка страницы."""

    @staticmethod
    def find_title(body: bytes, encoding: Optional[str] = None) -> Optional[str]:
        """Текст первого <title> либо None, если тега нет."""
        html = body.decode(resolve_charset(encoding), errors="replace")
        node = LexborHTMLParser(html).css_first("title")
        if node is None:
            return None
        return normalize_whitespace(node.text(deep=True))

    @classmethod
    def from_bytes(cls, body: bytes, encoding: Optional[str] = None) -> Title:
        found = cls.find_title(body, encoding)
        return Title(found if found is not None else MISSING_TITLE)

    @classmethod
    async def extract(
        cls,
        stream: aiohttp.StreamReader,
        encoding: Optional[str] = None,
        *,
        max_bytes: Optional[int] = None,
    ) -> Title:
        """Читает поток тела ответа и возвращает заголовок.

        Чтение прекращается, как только в прочитанной части найден закрытый <title>,
        либо в конце потока. max_bytes — необязательный предел, по умолчанию его нет.
        Ошибка чтения до того, как заголовок найден, возвращается как заголовок
        с degraded=True. Освобождение ответа — забота вызывающего (async with).
        """
        buf = bytearray()
        lowered = bytearray()
        scan_from = 0
        try:
            async for chunk in stream.iter_chunked(CHUNK_SIZE):
                buf.extend(chunk)
                lowered.extend(chunk.lower())
                while True:
                    pos = lowered.find(_TITLE_END, scan_from)
                    if pos == -1:
                        scan_from = max(scan_from, len(lowered) - len(_TITLE_END) + 1)
                        break
                    if lowered.find(b">", pos) == -1:
                        # закрывающий тег ещё не дочитан
                        break
                    # "</title" может оказаться внутри комментария или скрипта: проверяем разбором
                    found = cls.find_title(bytes(buf), encoding)
                    if found is not None:
                        return Title(found)
                    scan_from = pos + 1
                if max_bytes is not None and len(buf) >= max_bytes:
                    log.debug("title-scan stopped at max_bytes=%d", max_bytes)
                    break
        except STREAM_ERRORS as e:
            found = cls.find_title(bytes(buf), encoding)
            if found is not None:
                return Title(found)
            return Title(normalize_whitespace(describe_error(e)), degraded=True)
        return cls.from_bytes(bytes(buf), encoding)
