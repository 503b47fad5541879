from typing import Dict, Any, Optional, Set

from pydantic import ValidationError

from ...exceptions import DocumentError
from ..types.models import HTTP_METHODS, OpenAPI


class OpenApiParser:
    """Парсер OpenAPI спецификации"""

    def __init__(self, openapi_dict: Dict[str, Any]):
        self.openapi_dict = openapi_dict

    def parse(self) -> OpenAPI:
        """Разбор словаря в модель документа"""
        if not isinstance(self.openapi_dict, dict):
            raise DocumentError(
                f"Ожидался JSON объект, получено: {type(self.openapi_dict).__name__}"
            )

        try:
            return OpenAPI.model_validate(self._inline_component_refs(self.openapi_dict))
        except ValidationError as e:
            raise DocumentError(f"Некорректная структура документа: {e}") from e

    def _inline_component_refs(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """Подстановка $ref на параметры, тела запросов и ответы из components"""
        # Ссылки на components/schemas остаются именами типов
        paths = document.get("paths")
        if not isinstance(paths, dict):
            return document

        resolved_paths = {}
        for path, path_spec in paths.items():
            if not isinstance(path_spec, dict):
                resolved_paths[path] = path_spec
                continue

            resolved_spec = dict(path_spec)
            if isinstance(path_spec.get("parameters"), list):
                resolved_spec["parameters"] = self._resolve_list(
                    path_spec["parameters"], "parameters"
                )

            for method, method_spec in path_spec.items():
                if method.lower() in HTTP_METHODS and isinstance(method_spec, dict):
                    resolved_spec[method] = self._resolve_operation(method_spec)

            resolved_paths[path] = resolved_spec

        return {**document, "paths": resolved_paths}

    def _resolve_operation(self, operation: Dict[str, Any]) -> Dict[str, Any]:
        operation = dict(operation)

        if isinstance(operation.get("parameters"), list):
            operation["parameters"] = self._resolve_list(
                operation["parameters"], "parameters"
            )

        if isinstance(operation.get("requestBody"), dict):
            operation["requestBody"] = self._resolve(
                operation["requestBody"], "requestBodies"
            )

        if isinstance(operation.get("responses"), dict):
            resolved = {
                code: self._resolve(response, "responses")
                for code, response in operation["responses"].items()
            }
            operation["responses"] = {
                code: response for code, response in resolved.items() if response is not None
            }

        return operation

    def _resolve_list(self, items: list, section: str) -> list:
        # Неразрешимые ссылки отбрасываются
        return [
            resolved
            for resolved in (self._resolve(_, section) for _ in items)
            if resolved is not None
        ]

    def _resolve(
        self, item: Any, section: str, seen: Optional[Set[str]] = None
    ) -> Optional[Any]:
        if not isinstance(item, dict) or "$ref" not in item:
            return item

        prefix = f"#/components/{section}/"
        ref = item["$ref"]
        if not isinstance(ref, str) or not ref.startswith(prefix):
            return None

        # Цикл ссылок: ссылка отбрасывается
        seen = seen or set()
        if ref in seen:
            return None
        seen.add(ref)

        components = self.openapi_dict.get("components")
        section_items = components.get(section) if isinstance(components, dict) else None
        if not isinstance(section_items, dict):
            return None

        target = section_items.get(ref[len(prefix) :])
        if not isinstance(target, dict):
            return None

        # Цепочка ссылок: ссылка может указывать на другую ссылку
        if "$ref" in target:
            return self._resolve(target, section, seen)

        return target
