import logging
import textwrap
from typing import List, Optional

import toml

from ..types.models import CallSite, CodeBlock, Project
from ..types.registry import InterfaceRegistry
from .dto_generator import DtoGenerator
from .templates import templates

logger = logging.getLogger(__name__)

DTOS_FILE = "dtos.ts"
SERVICE_FILE = "api.service.ts"
CONFIG_FILE = "builder.toml"


def render_method_body(call_site: CallSite) -> str:
    """Метод Angular сервиса: аргументы - path параметры, queryParams, payload"""
    arguments = [call_site.parameters] if call_site.parameters else []
    if call_site.payload_type:
        arguments.append(f"payload: {call_site.payload_type}")

    http_arguments = [f"`${{this.baseUrl()}}{call_site.path}`"]
    if call_site.payload_type:
        http_arguments.append("payload")
    if call_site.has_query_params:
        http_arguments.append("{ params }")

    lines = [
        f"{call_site.function_name}({', '.join(arguments)}): "
        f"Observable<{call_site.response_type}> {{"
    ]
    if call_site.has_query_params:
        lines.append("  const params = httpParamBuilder(queryParams);")
    lines.append(
        f"  return this.http.{call_site.http_method.lower()}<{call_site.response_type}>"
        f"({', '.join(http_arguments)});"
    )
    lines.append("}")

    return "\n".join(lines) + "\n"


def render_method(call_site: CallSite) -> str:
    """
    Отрисовка метода для одной операции.

    Query-интерфейс выводится перед методом, только если есть query
    параметры.
    """
    method = render_method_body(call_site)
    if call_site.has_query_params:
        return call_site.query_param_interface + "\n" + method

    return method


class ServiceGenerator:
    """Сборка файлов Angular сервиса и DTO из результатов генерации"""

    def __init__(
        self,
        registry: InterfaceRegistry,
        api_list: List[CallSite],
        service_name: str = "ApiService",
        base_url: str = "",
        source_url: Optional[str] = None,
    ):
        self.dto_generator = DtoGenerator(registry)
        self.api_list = api_list
        self.service_name = service_name
        self.base_url = base_url
        self.source_url = source_url
        self.project = Project(name="api")

    @property
    def registry(self) -> InterfaceRegistry:
        return self.dto_generator.registry

    def generate(self) -> Project:
        """Основная генерация"""
        self._generate_dtos()
        self._generate_service()

        # Конфиг рядом со сгенерированными файлами
        if self.source_url:
            self.project.add_file(CONFIG_FILE).add_code_block(
                CodeBlock(
                    code="# Configuration for Angular service builder\n"
                    + toml.dumps({"source": self.source_url})
                )
            )

        logger.info(
            "Файлы сервиса: %s", ", ".join(_.file_name for _ in self.project.files)
        )
        return self.project

    def _generate_dtos(self):
        """Все интерфейсы реестра, упорядоченные по имени"""
        dtos_file = self.project.add_file(DTOS_FILE)
        dtos_file.imports.append(templates.dto_header)

        for name in sorted(self.registry.names()):
            dtos_file.add_code_block(CodeBlock(code=self.registry.get(name)))

    def _generate_service(self):
        service_file = self.project.add_file(SERVICE_FILE)

        dto_names = self._collect_used_dtos()
        dto_imports = (
            "\nimport { " + ", ".join(dto_names) + " } from './dtos';\n"
            if dto_names
            else ""
        )

        query_interfaces = [
            _.query_param_interface for _ in self.api_list if _.has_query_params
        ]

        methods = "".join(
            "\n" + textwrap.indent(render_method_body(_), "  ")
            for _ in self.api_list
        )

        service_file.add_code_block(
            CodeBlock(
                code=templates.service.format(
                    dto_imports=dto_imports,
                    query_interfaces=(
                        "\n" + "\n".join(query_interfaces) if query_interfaces else ""
                    ),
                    service_name=self.service_name,
                    base_url=self.base_url,
                    methods=methods,
                )
            )
        )

    def _collect_used_dtos(self) -> List[str]:
        """Имена DTO, достижимых из ответов и тел запросов всех методов"""
        names = []
        for call_site in self.api_list:
            for root in (call_site.response_type, call_site.payload_type):
                if not root:
                    continue

                for name in self.dto_generator.collect_dto_names(root):
                    if name not in names:
                        names.append(name)

        return sorted(names)
