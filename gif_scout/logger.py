# gif_scout/logger.py
"""Логгер GifScout.

Все модули пишут в один именованный логгер ``GifScout``::

    from gif_scout.logger import logger

Вывод идёт в stderr: stdout команды ``crawl`` занят JSON-результатом.
CLI перенастраивает логгер через :func:`init_logging` после разбора
``--log-level`` / ``--log-file`` / ``--log-format``.
"""
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional, Union

LOGGER_NAME = "GifScout"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# ротация файла: 5 МБ x 3 архива
_ROTATE_BYTES = 5 * 1024 * 1024
_ROTATE_KEEP = 3


@dataclass(frozen=True)
class LogTarget:
    """Куда и в каком виде писать."""

    level: Union[int, str] = "INFO"
    file: Optional[Path] = None
    fmt: str = LOG_FORMAT

    def handlers(self) -> List[logging.Handler]:
        out: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
        if self.file is not None:
            out.append(
                RotatingFileHandler(
                    self.file, maxBytes=_ROTATE_BYTES, backupCount=_ROTATE_KEEP, encoding="utf-8"
                )
            )
        formatter = logging.Formatter(self.fmt)
        for h in out:
            h.setFormatter(formatter)
        return out


def _detach_all(lg: logging.Logger) -> None:
    while lg.handlers:
        h = lg.handlers[0]
        lg.removeHandler(h)
        h.close()


def configure(target: LogTarget, *, keep_existing: bool = False) -> logging.Logger:
    """Применить *target* к логгеру ``GifScout``.

    По умолчанию старые обработчики закрываются, так что повторный вызов
    не дублирует строки в выводе.
    """
    lg = logging.getLogger(LOGGER_NAME)
    if not keep_existing:
        _detach_all(lg)
    lg.setLevel(target.level)
    for h in target.handlers():
        lg.addHandler(h)
    lg.propagate = False
    return lg


def init_logging(
    level: Union[int, str] = "INFO",
    log_file: Union[str, Path, None] = None,
    log_format: str = LOG_FORMAT,
) -> logging.Logger:
    """Точка входа для CLI."""
    return configure(LogTarget(level=level, file=Path(log_file) if log_file else None, fmt=log_format))


# до вызова init_logging() библиотека молчит ниже WARNING и не создаёт файлов
logger: logging.Logger = init_logging(level="WARNING")

__all__ = ["LogTarget", "configure", "init_logging", "logger"]
