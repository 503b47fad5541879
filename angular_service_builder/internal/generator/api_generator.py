import logging
from typing import Dict, List, Optional

from ..types.models import CallSite, MediaType, OpenAPI, Operation
from ..types.registry import InterfaceRegistry
from ..utils import function_name_from_path, optional_suffix, ref_name, to_camel_case
from .dto_generator import DtoGenerator, map_type

logger = logging.getLogger(__name__)

PREFERRED_MEDIA_TYPE = "application/json"


def ordered_media_types(content: Dict[str, MediaType]) -> List[MediaType]:
    """Медиа-типы в детерминированном порядке: application/json, затем по алфавиту"""
    return [
        content[key]
        for key in sorted(content, key=lambda k: (k != PREFERRED_MEDIA_TYPE, k))
    ]


class ApiListBuilder:
    """Построение списка методов API (call site) по операциям документа"""

    def __init__(
        self, document: OpenAPI, registry: Optional[InterfaceRegistry] = None
    ):
        self.document = document
        self.dto_generator = DtoGenerator(registry)

    @property
    def registry(self) -> InterfaceRegistry:
        return self.dto_generator.registry

    def generate(self) -> List[CallSite]:
        """Один call site на каждую пару (путь, метод) в порядке документа"""
        api_list = []
        seen_names = set()

        for path, operations in self.document.paths.items():
            for method, operation in operations.items():
                call_site = self._generate_call_site(path, method, operation)

                if call_site.function_name in seen_names:
                    logger.warning(
                        "Повторное имя функции %s (%s %s)",
                        call_site.function_name,
                        method.upper(),
                        path,
                    )
                seen_names.add(call_site.function_name)

                api_list.append(call_site)

        logger.info("Сгенерировано методов API: %d", len(api_list))
        return api_list

    def _generate_call_site(
        self, path: str, method: str, operation: Operation
    ) -> CallSite:
        function_name = self._create_function_name(path, method, operation)

        path_params = []
        query_lines = [f"export interface {function_name}QueryParams {{\n"]
        has_query_params = False

        for param in operation.parameters:
            camel_case_name = to_camel_case(param.name)

            if param.location == "path":
                path_params.append(f"{camel_case_name}: {map_type(param.schema_)}")
            elif param.location == "query":
                has_query_params = True
                query_lines.append(
                    f"  {camel_case_name}{optional_suffix(param.required)}: "
                    f"{map_type(param.schema_)};\n"
                )

        query_lines.append("}\n")

        parameters = ", ".join(path_params)
        if has_query_params:
            if parameters:
                parameters += ", "
            parameters += f"queryParams: {function_name}QueryParams"

        return CallSite(
            function_name=function_name,
            parameters=parameters,
            query_param_interface="".join(query_lines),
            response_type=self._get_response_type(operation),
            payload_type=self._get_payload_type(operation),
            path=self._interpolate_path(path, operation),
            has_query_params=has_query_params,
            http_method=method,
            original_path=path,
            summary=operation.summary,
            tags=operation.tags,
        )

    @staticmethod
    def _create_function_name(path: str, method: str, operation: Operation) -> str:
        if operation.operation_id:
            return to_camel_case(operation.operation_id)

        return function_name_from_path(method, path)

    def _get_payload_type(self, operation: Operation) -> str:
        """Тип тела запроса; генерирует интерфейс схемы, если она есть в components"""
        if operation.request_body is None:
            return ""

        for media_type in ordered_media_types(operation.request_body.content):
            if media_type.schema_.ref:
                payload_type = ref_name(media_type.schema_.ref)

                schema = self.document.components.schemas.get(payload_type)
                if schema is not None:
                    self.dto_generator.generate_interface(payload_type, schema)

                return payload_type

        return ""

    @staticmethod
    def _get_response_type(operation: Operation) -> str:
        response = operation.responses.get("200")
        if response is None:
            return "void"

        for media_type in ordered_media_types(response.content):
            schema = media_type.schema_

            if schema.type == "array" and schema.items is not None and schema.items.ref:
                return f"{ref_name(schema.items.ref)}[]"
            elif schema.ref:
                return ref_name(schema.ref)

        return "void"

    @staticmethod
    def _interpolate_path(path: str, operation: Operation) -> str:
        for param in operation.parameters:
            if param.location == "path":
                path = path.replace(
                    f"{{{param.name}}}", f"${{{to_camel_case(param.name)}}}"
                )

        return path


def generate_api_list(
    document: OpenAPI, registry: Optional[InterfaceRegistry] = None
) -> List[CallSite]:
    return ApiListBuilder(document, registry).generate()
