"""
Загрузка OpenAPI спецификации из файла или по URL
"""

import json
import logging
import os
from typing import Any, Dict

import httpx

from .exceptions import LoadError

logger = logging.getLogger(__name__)

DEFAULT_SPEC_NAME = "openapi.json"


def spec_url(url: str) -> str:
    """URL документа: ссылки на .json используются как есть, иначе добавляется openapi.json"""
    if url.split("?", 1)[0].endswith(".json"):
        return url

    return url + ("" if url.endswith("/") else "/") + DEFAULT_SPEC_NAME


def fetch_document(url: str, timeout: float = 30.0) -> Dict[str, Any]:
    """Загрузка документа по HTTP"""
    url = spec_url(url)
    logger.info("Загрузка спецификации: %s", url)

    try:
        response = httpx.get(url, timeout=timeout, follow_redirects=True)
        response.raise_for_status()
        return response.json()
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise LoadError(f"Не удалось загрузить спецификацию из {url}: {e}") from e
    except ValueError as e:
        raise LoadError(f"Ответ {url} не является JSON: {e}") from e


def read_document(path: str) -> Dict[str, Any]:
    """Чтение документа из локального файла"""
    logger.info("Чтение спецификации: %s", path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise LoadError(f"Не удалось прочитать файл {path}: {e}") from e
    except ValueError as e:
        raise LoadError(f"Файл {path} не является JSON: {e}") from e


def load_document(source: str) -> Dict[str, Any]:
    """
    Загрузка OpenAPI спецификации.

    Args:
        source: Путь к локальному файлу, URL (http/https) или адрес без протокола

    Raises:
        LoadError: если документ не удалось получить или разобрать как JSON
    """
    if not source:
        raise LoadError("Источник спецификации не указан")

    # Проверяем - это локальный файл или URL
    if source.startswith(("http://", "https://")):
        return fetch_document(source)
    elif os.path.exists(source):
        return read_document(source)

    # Попробуем как URL без протокола
    try:
        return fetch_document("https://" + source)
    except LoadError as e:
        raise LoadError(
            f"Не удалось загрузить спецификацию из {source}. Проверьте URL или путь к файлу."
        ) from e
