# === FILE: gif_scout/config.py ===
"""
Загрузка и валидация конфигурации GifScout.

Схема описана моделями Pydantic; некорректная конфигурация
(например, ``max_pages < 1``) отклоняется ещё до начала обхода.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class CrawlConfig(BaseModel):
    """Параметры одного обхода. Не меняются во время обхода."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    depth: int = Field(0, ge=0, description="Глубина перехода по ссылкам; 0 — только стартовая страница.")
    include_subdomains: bool = Field(False, description="Разрешить поддомены базового домена.")
    max_pages: int = Field(200, ge=1, description="Жесткий лимит загружаемых страниц.")
    user_agent: str = Field("GifScoutBot/1.0", min_length=1, description="Заголовок User-Agent.")
    request_delay: float = Field(0.1, ge=0, description="Фиксированная пауза между запросами (секунд).")
    timeout: Optional[float] = Field(None, gt=0, description="Таймаут одного запроса; None — без таймаута.")


class DownloadConfig(BaseModel):
    """Настройки загрузчика найденных GIF."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    output_dir: Path = Field(Path("downloads"), description="Корневая папка для файлов.")
    preserve_path: bool = Field(False, description="Сохранять путь из URL внутри gifs/.")
    gap: float = Field(0.12, ge=0, description="Пауза между загрузками (секунд).")

    @field_validator("output_dir", mode="before")
    def _expand_user(cls, v: Any) -> Any:
        if isinstance(v, str):
            return Path(v).expanduser()
        return v


class ScoutConfig(BaseModel):
    """Полная конфигурация запуска: обход + загрузка."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    crawl: CrawlConfig = Field(default_factory=CrawlConfig)
    download: DownloadConfig = Field(default_factory=DownloadConfig)


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> ScoutConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект ScoutConfig.

    Без пути используется configs/default.yaml, а если его нет —
    значения по умолчанию. Явно указанный, но отсутствующий файл
    приводит к FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            return ScoutConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    try:
        return ScoutConfig(**data)
    except ValidationError:
        raise


__all__ = ["CrawlConfig", "DownloadConfig", "ScoutConfig", "load_config"]
