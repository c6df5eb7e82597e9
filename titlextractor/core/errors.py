# Руководство к файлу
# Назначение: иерархия исключений пакета (конфигурация, закрытые очереди).
# Этап: базовая реализация. Обновляйте комментарий при изменениях.
# Важно: ошибки отдельных URL исключениями не являются, они попадают в Result.error.


class TitleExtractorError(Exception):
    """Базовое исключение titlextractor."""


class ConfigError(TitleExtractorError, ValueError):
    """Некорректная конфигурация запуска. Фатальна: конвейер не стартует."""


class QueueClosedError(TitleExtractorError):
    """Очередь закрыта: запись запрещена, либо чтение после полного опустошения."""


class InputReadError(TitleExtractorError):
    """Ошибка чтения входного потока URL (в том числе слишком длинная строка)."""


def describe_error(exc: BaseException) -> str:
    """Текст ошибки для вывода; у таймаутов сообщение часто пустое, тогда берём имя класса."""
    text = str(exc).strip()
    return text or exc.__class__.__name__
