"""
Ошибки на границе генератора: загрузка и разбор входного документа
"""


class LoadError(ValueError):
    """Не удалось прочитать или скачать документ OpenAPI"""


class DocumentError(ValueError):
    """Документ не является объектом OpenAPI ожидаемой структуры"""
