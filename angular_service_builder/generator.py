"""
Главный модуль генератора - чистый интерфейс
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional

from .internal.generator.api_generator import ApiListBuilder
from .internal.generator.dto_generator import DtoGenerator
from .internal.generator.service_generator import ServiceGenerator
from .internal.parser.openapi import OpenApiParser
from .internal.types.models import CallSite, OpenAPI, Project
from .internal.types.registry import InterfaceRegistry

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Результат одного прохода генерации: реестр интерфейсов и список методов"""

    registry: InterfaceRegistry
    api_list: List[CallSite] = field(default_factory=list)

    def find_call_site(self, function_name: str) -> Optional[CallSite]:
        for call_site in self.api_list:
            if call_site.function_name == function_name:
                return call_site

        return None

    def collect_dtos(self, call_site: CallSite) -> List[str]:
        """DTO ответа, затем DTO тела запроса, без повторов"""
        dto_generator = DtoGenerator(self.registry)

        names = dto_generator.collect_dto_names(call_site.response_type)
        if call_site.payload_type:
            names += [
                _
                for _ in dto_generator.collect_dto_names(call_site.payload_type)
                if _ not in names
            ]

        return [self.registry.get(_) for _ in names]


class ServiceBuilder:
    """Чистый интерфейс для генерации DTO и Angular сервиса"""

    def __init__(self, openapi_spec: Dict[str, Any], source_url: str = None):
        self.parser = OpenApiParser(openapi_spec)
        self.source_url = source_url

    def parse(self) -> OpenAPI:
        return self.parser.parse()

    def generate(self) -> GenerationResult:
        """Проход генерации со свежим реестром"""
        document = self.parse()
        logger.info(
            "Документ: путей %d, схем %d",
            len(document.paths),
            len(document.components.schemas),
        )
        registry = InterfaceRegistry()

        DtoGenerator(registry).generate_components(document.components.schemas)
        api_list = ApiListBuilder(document, registry).generate()

        return GenerationResult(registry=registry, api_list=api_list)

    def build_project(
        self,
        result: Optional[GenerationResult] = None,
        service_name: str = "ApiService",
        base_url: str = "",
    ) -> Project:
        """Генерация файлов проекта (dtos.ts, api.service.ts)"""
        result = result or self.generate()

        return ServiceGenerator(
            result.registry,
            result.api_list,
            service_name=service_name,
            base_url=base_url,
            source_url=self.source_url,
        ).generate()


def generate_service(openapi_spec: Dict[str, Any], source_url: str = None) -> Project:
    """Создание файлов Angular сервиса из OpenAPI спецификации"""
    return ServiceBuilder(openapi_spec, source_url).build_project()
