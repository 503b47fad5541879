"""Генератор TypeScript DTO и Angular сервисов из OpenAPI спецификаций"""

from .generator import GenerationResult, ServiceBuilder, generate_service

__all__ = ["GenerationResult", "ServiceBuilder", "generate_service"]
