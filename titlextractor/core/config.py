# Руководство к файлу
# Назначение: параметры запуска (число воркеров, таймауты, лимиты строк и тела ответа, вывод).
# Этап: базовая реализация. Проверка значений выполняется в __post_init__.
# Обновляйте комментарий при изменениях.

from dataclasses import dataclass
from typing import Optional

from titlextractor.core.errors import ConfigError


MIB = 1024 * 1024


@dataclass(frozen=True)
class TitleConfig:
    """Конфигурация конвейера загрузки и извлечения заголовков."""

    # Конкурентность
    worker_count: int = 5
    # ёмкость очередей = queue_factor * worker_count
    queue_factor: int = 2

    # Входной поток
    max_line_bytes: int = MIB

    # Сетевые настройки
    request_timeout_sec: float = 12.0
    client_timeout_sec: float = 15.0
    connect_timeout_sec: float = 5.0
    keepalive_sec: float = 30.0
    verify_tls: bool = False
    user_agent: str = "titlextractor/0.1"

    # Необязательный предел чтения тела в поисках <title>; None — читать до конца
    max_body_bytes: Optional[int] = None

    # Вывод
    color: bool = True

    def __post_init__(self) -> None:
        if self.worker_count < 1:
            raise ConfigError(f"worker count must be >= 1, got {self.worker_count}")
        if self.queue_factor < 1:
            raise ConfigError(f"queue factor must be >= 1, got {self.queue_factor}")
        if self.max_line_bytes < 1:
            raise ConfigError(f"max line bytes must be >= 1, got {self.max_line_bytes}")
        if self.max_body_bytes is not None and self.max_body_bytes < 1:
            raise ConfigError(f"max body bytes must be >= 1, got {self.max_body_bytes}")
        for name in ("request_timeout_sec", "client_timeout_sec", "connect_timeout_sec", "keepalive_sec"):
            value = getattr(self, name)
            if value <= 0:
                raise ConfigError(f"{name} must be > 0, got {value}")

    @property
    def queue_capacity(self) -> int:
        return self.queue_factor * self.worker_count
