import logging
from typing import List, Optional, Set, Tuple

from ..types.models import Schema
from ..types.registry import InterfaceRegistry
from ..utils import ref_name, to_camel_case

logger = logging.getLogger(__name__)

PRIMITIVE_TYPES = {"string", "number", "boolean", "any"}

NULLABLE_SUFFIX = " | null"
NESTED_SUFFIX = "DTO"


def map_type(schema: Schema) -> str:
    """Отображение схемы OpenAPI в выражение типа TypeScript"""
    if schema.type:
        if schema.type == "string":
            return "string"
        elif schema.type == "integer":
            return "number"
        elif schema.type == "boolean":
            return "boolean"
        elif schema.type == "array" and schema.items is not None:
            return map_type(schema.items) + "[]"
    elif schema.ref:
        return ref_name(schema.ref)

    return "any"


def base_type_name(type_expression: str) -> str:
    """Имя типа без суффиксов массива: 'Widget[][]' -> 'Widget'"""
    while type_expression.endswith("[]"):
        type_expression = type_expression[:-2]

    return type_expression


class DtoGenerator:
    """Генератор TypeScript интерфейсов (DTO) из схем OpenAPI"""

    def __init__(self, registry: Optional[InterfaceRegistry] = None):
        self.registry = registry if registry is not None else InterfaceRegistry()

    def generate_interface(self, name: str, schema: Schema) -> str:
        """
        Генерация интерфейса `name` и всех вложенных анонимных интерфейсов.

        Вложенные объекты (и массивы объектов) получают имя
        `<имя свойства>DTO` по оригинальному имени свойства. Результат
        записывается в реестр; существующая запись перезаписывается.

        Returns:
            Текст сгенерированного интерфейса
        """
        lines = [f"export interface {name} {{\n"]
        references: List[str] = []

        for prop_name, prop_schema in schema.properties.items():
            member = self._generate_member(prop_name, prop_schema, references)
            if member:
                lines.append(member)

        lines.append("}\n\n")
        text = "".join(lines)

        if self.registry.register(name, text, references):
            logger.debug("Интерфейс %s перезаписан другим содержимым", name)

        return text

    def _generate_member(
        self, prop_name: str, prop_schema: Schema, references: List[str]
    ) -> Optional[str]:
        member_name = to_camel_case(prop_name)

        if prop_schema.type == "object":
            nested_name = prop_name + NESTED_SUFFIX
            self.generate_interface(nested_name, prop_schema)
            member_type = nested_name

        elif prop_schema.type == "array":
            if prop_schema.items is None:
                return None

            item_type = map_type(prop_schema.items)
            if prop_schema.items.type == "object":
                item_type = prop_name + NESTED_SUFFIX
                self.generate_interface(item_type, prop_schema.items)

            member_type = item_type + "[]"

        else:
            member_type = map_type(prop_schema)

        referenced = base_type_name(member_type)
        if referenced not in PRIMITIVE_TYPES and referenced not in references:
            references.append(referenced)

        return f"  {member_name}: {member_type}{NULLABLE_SUFFIX};\n"

    def generate_components(self, schemas: dict):
        """Предварительная генерация всех именованных схем"""
        for name, schema in schemas.items():
            self.generate_interface(name, schema)

        logger.info("Сгенерировано DTO: %d", len(self.registry))

    def collect_dto_names(self, name: str) -> List[str]:
        """
        Имена всех интерфейсов, достижимых из `name` (включая его самого).

        Суффикс '[]' отбрасывается. Отсутствующие в реестре имена
        пропускаются. Каждое имя посещается не более одного раза.
        """
        collected: List[str] = []
        processed: Set[str] = set()

        def collect(current: str):
            if current in processed:
                return
            processed.add(current)

            text = self.registry.get(current)
            if text is None:
                return

            collected.append(current)
            for key in self._linked_names(current, text):
                collect(key)

        collect(base_type_name(name))
        return collected

    def collect_all_dtos(self, name: str) -> List[str]:
        """Тексты всех интерфейсов, достижимых из `name`, без повторов"""
        return [self.registry.get(_) for _ in self.collect_dto_names(name)]

    def _linked_names(self, name: str, text: str) -> Tuple[str, ...]:
        references = self.registry.references(name)
        if references is not None:
            return references

        # Интерфейс зарегистрирован текстом: ищем имена других интерфейсов как подстроки
        return tuple(
            key for key in self.registry.names() if key != name and key in text
        )


def generate_interface(registry: InterfaceRegistry, name: str, schema: Schema) -> str:
    return DtoGenerator(registry).generate_interface(name, schema)


def collect_all_dtos(registry: InterfaceRegistry, name: str) -> List[str]:
    return DtoGenerator(registry).collect_all_dtos(name)
