"""
Логи драйвера идут через structlog (get_logger).

Пакет при импорте логирование не настраивает: обработчики и уровень root-логгера
принадлежат приложению. configure_logging() вызывает хост (или тесты), если
хочет тот же вывод, что и у нас: stdlib-записи (httpx и т.п.) рендерятся той же
цепочкой процессоров, что и события драйвера.
"""
import json
import logging
from typing import Any, List, Optional

import structlog
from structlog.contextvars import merge_contextvars
from structlog.dev import ConsoleRenderer
from structlog.processors import JSONRenderer, TimeStamper, add_log_level
from structlog.stdlib import ProcessorFormatter

from .settings import settings


def _json_renderer() -> JSONRenderer:
    # structlog передаёт в serializer ещё default/sort_keys
    def _dumps(obj, default=None, **kwargs):
        return json.dumps(obj, ensure_ascii=False, default=default, **kwargs)

    return JSONRenderer(serializer=_dumps)


def configure_logging(level: Optional[str] = None, json_output: Optional[bool] = None) -> logging.Handler:
    """
    level по умолчанию LOG_LEVEL из настроек, json_output - всё, кроме APP_ENV=dev.
    Возвращает установленный обработчик.
    """
    if json_output is None:
        json_output = settings.APP_ENV != "dev"

    pre_chain: List[Any] = [
        merge_contextvars,
        add_log_level,
        TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[*pre_chain, ProcessorFormatter.wrap_for_formatter],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            ProcessorFormatter.remove_processors_meta,
            _json_renderer() if json_output else ConsoleRenderer(colors=False),
        ],
    ))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO))
    return handler


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
