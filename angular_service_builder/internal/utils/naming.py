"""Утилиты для работы с именами типов, полей и функций"""

import re

_WORD_RE = re.compile(r"[A-Za-z][^A-Z\s]*")
_NON_IDENTIFIER_RE = re.compile(r"[^A-Za-z0-9]+")


def _title(word: str) -> str:
    """Заглавная буква в начале каждого слова, остальные символы без изменений"""
    result = []
    after_separator = True

    for char in word:
        result.append(char.upper() if after_separator else char)
        after_separator = not (char.isalnum() or char == "_")

    return "".join(result)


def to_camel_case(value: str) -> str:
    """
    Преобразование идентификатора в lowerCamelCase.

    Слова разделяются подчеркиваниями, пробелами и заглавными буквами.
    Первое слово приводится к нижнему регистру, у остальных
    поднимается только первая буква.

    Examples:
        >>> to_camel_case("transaction_channel")
        'transactionChannel'
        >>> to_camel_case("SettingDropdowns")
        'settingDropdowns'
        >>> to_camel_case("getWidgetById")
        'getWidgetById'
    """
    words = _WORD_RE.findall(value.replace("_", " "))

    return "".join(
        word.lower() if i == 0 else _title(word) for i, word in enumerate(words)
    )


def function_name_from_path(method: str, path: str) -> str:
    """
    Имя функции для операции без operationId: метод + статические сегменты пути.

    Без этого правила такая операция получила бы пустое имя.

    Examples:
        >>> function_name_from_path("get", "/widgets/{id}")
        'getWidgets'
    """
    segments = [p for p in path.strip("/").split("/") if p and "{" not in p]

    return to_camel_case(_NON_IDENTIFIER_RE.sub(" ", " ".join([method] + segments)))


def optional_suffix(is_required: bool) -> str:
    """Знак вопроса для необязательных query параметров"""
    return "" if is_required else "?"


def ref_name(ref: str) -> str:
    """Имя схемы из $ref: текст после последнего '/'"""
    return ref[ref.rfind("/") + 1 :]
