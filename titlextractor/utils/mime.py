# Руководство к файлу
# Назначение: утилиты для заголовка Content-Type (MIME-тип и кодировка).
# Этап: базовая реализация. Обновляйте комментарий при изменениях.

import codecs
from typing import Optional, Tuple


def parse_content_type(header: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    """Парсит заголовок Content-Type. Возвращает (mime, charset)."""
    if not header:
        return None, None
    parts = [p.strip() for p in header.split(";")]
    mime = parts[0].lower() if parts and parts[0] else None
    charset = None
    for p in parts[1:]:
        if p.lower().startswith("charset="):
            charset = p.split("=", 1)[1].strip().strip('"').lower() or None
            break
    return mime, charset


def resolve_charset(charset: Optional[str], default: str = "utf-8") -> str:
    """Возвращает известную Python кодировку, иначе default."""
    if not charset:
        return default
    try:
        return codecs.lookup(charset).name
    except LookupError:
        return default
