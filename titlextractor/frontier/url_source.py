# Руководство к файлу
# Назначение: источник URL — построчное чтение входного потока в ограниченную очередь.
# Этап: расширенная реализация. Каналы и терминалы читаются через event loop
#   (connect_read_pipe + asyncio.StreamReader), обычные файлы и потоки в памяти — в потоке.
# Обновляйте комментарий при изменениях.
# Важно: очередь закрывается ровно один раз в любом исходе (EOF, ошибка чтения, отмена).

from __future__ import annotations

import asyncio
import io
import logging
import os
import stat
from typing import IO, Optional, Union

from titlextractor.core.errors import InputReadError
from titlextractor.frontier.queue import ClosableQueue


log = logging.getLogger(__name__)


class PipeLineReader:
    """Строки из канала/терминала через asyncio.StreamReader; поток чтения не занимается."""

    def __init__(self, reader: asyncio.StreamReader, transport: asyncio.BaseTransport, max_line_bytes: int) -> None:
        self._reader = reader
        self._transport = transport
        self._max_line_bytes = max_line_bytes

    async def readline(self) -> bytes:
        try:
            return await self._reader.readline()
        except ValueError as e:
            # StreamReader сообщает о превышении limit через ValueError
            raise InputReadError(f"line exceeds {self._max_line_bytes} bytes") from e
        except OSError as e:
            raise InputReadError(str(e) or e.__class__.__name__) from e

    def close(self) -> None:
        self._transport.close()


class BlockingLineReader:
    """Строки из обычного файла или потока в памяти: по одному readline в потоке."""

    def __init__(self, stream: IO, max_line_bytes: int) -> None:
        self._stream = stream
        self._max_line_bytes = max_line_bytes

    async def readline(self) -> Union[bytes, str]:
        try:
            raw = await asyncio.to_thread(self._stream.readline, self._max_line_bytes + 1)
        except (OSError, ValueError) as e:
            raise InputReadError(str(e) or e.__class__.__name__) from e
        if len(raw) > self._max_line_bytes and not _ends_with_newline(raw):
            raise InputReadError(f"line exceeds {self._max_line_bytes} bytes")
        return raw

    def close(self) -> None:
        pass


def _is_pollable(stream: IO) -> bool:
    """Канал, сокет или терминал: чтение может ждать бесконечно, поэтому только через loop."""
    if os.name != "posix":
        return False
    try:
        mode = os.fstat(stream.fileno()).st_mode
    except (OSError, ValueError, io.UnsupportedOperation):
        return False
    # /dev/null и прочие символьные устройства, кроме терминала, epoll не поддерживает
    return stat.S_ISFIFO(mode) or stat.S_ISSOCK(mode) or stream.isatty()


async def open_line_reader(stream: IO, max_line_bytes: int) -> Union[PipeLineReader, BlockingLineReader]:
    if not _is_pollable(stream):
        return BlockingLineReader(stream, max_line_bytes)
    loop = asyncio.get_running_loop()
    reader = asyncio.StreamReader(limit=max_line_bytes)
    transport, _ = await loop.connect_read_pipe(lambda: asyncio.StreamReaderProtocol(reader), stream)
    return PipeLineReader(reader, transport, max_line_bytes)


class UrlSource:
    """Читает строки из потока, обрезает пробелы, пустые строки отбрасывает."""

    def __init__(self, stream: IO, queue: ClosableQueue[str], max_line_bytes: int) -> None:
        self._stream = stream
        self._queue = queue
        self._max_line_bytes = max_line_bytes
        self.queued = 0
        self.error: Optional[str] = None

    async def run(self) -> int:
        """Наполняет очередь и закрывает её. Возвращает число поставленных URL."""
        lines: Optional[Union[PipeLineReader, BlockingLineReader]] = None
        try:
            lines = await open_line_reader(self._stream, self._max_line_bytes)
            while True:
                raw = await lines.readline()
                if not raw:
                    break
                line = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
                url = line.strip()
                if not url:
                    continue
                await self._queue.put(url)
                self.queued += 1
        except InputReadError as e:
            self.error = str(e)
            log.error("[Scanner Error] %s", e)
        finally:
            self._queue.close()
            if lines is not None:
                lines.close()
        log.debug("source done queued=%d", self.queued)
        return self.queued


def _ends_with_newline(raw: Union[bytes, str]) -> bool:
    if isinstance(raw, bytes):
        return raw.endswith(b"\n")
    return raw.endswith("\n")
