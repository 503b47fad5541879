import argparse
import logging
import os
import sys
from typing import Optional

from angular_service_builder.config import BuilderConfig
from angular_service_builder.exceptions import DocumentError, LoadError
from angular_service_builder.generator import GenerationResult, ServiceBuilder
from angular_service_builder.internal.types.models import Project
from angular_service_builder.loader import load_document
from angular_service_builder.server import run_server

DEFAULT_OUTPUT_DIR = "generated"


def _configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _generate_core(config: BuilderConfig) -> ServiceBuilder:
    """Ядро генерации - загрузка спецификации и подготовка генератора"""
    if not config.source:
        raise ValueError("Источник спецификации не указан в конфигурации")

    print(f"🚀 Генерация из {config.source}")
    print("📥 Загрузка OpenAPI спецификации...")
    openapi_spec = load_document(config.source)

    return ServiceBuilder(openapi_spec, source_url=config.source)


def save_project(project: Project, target_path: str):
    """Сохранение файлов проекта"""
    print(f"💾 Сохранение {len(project.files)} файлов...")

    for code_file in project.files:
        path = os.path.join(target_path, code_file.file_name)
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            f.write(str(code_file))

    print("✅ Генерация завершена успешно!")
    print(f"📦 Файлы созданы в: {os.path.abspath(target_path)}")


def _resolve_config(args) -> Optional[BuilderConfig]:
    file_config = BuilderConfig.from_file(args.config or "builder.toml")

    if file_config:
        print(f"📋 Используется конфиг {args.config or 'builder.toml'}")
        return file_config.merge_with_args(args)

    if args.source:
        return BuilderConfig(
            source=args.source,
            output_dir=args.output or DEFAULT_OUTPUT_DIR,
            service_name=args.service_name or "ApiService",
            host=args.host or "127.0.0.1",
            port=args.port or 8080,
        )

    return None


def generate(argv=None):
    """Генерация TypeScript DTO и Angular сервиса из OpenAPI"""
    parser = argparse.ArgumentParser(
        description="Генерация TypeScript DTO и Angular сервиса из OpenAPI"
    )
    parser.add_argument("--source", type=str, help="Путь или URL к OpenAPI спецификации")
    parser.add_argument("--output", type=str, help="Директория для сгенерированных файлов")
    parser.add_argument("--config", type=str, help="Путь к builder.toml")
    parser.add_argument("--service-name", type=str, help="Имя класса Angular сервиса")
    parser.add_argument(
        "--serve", action="store_true", help="Запустить HTML страницу со списком методов"
    )
    parser.add_argument("--host", type=str, help="Адрес сервера")
    parser.add_argument("--port", type=int, help="Порт сервера")
    parser.add_argument(
        "--init-config", action="store_true", help="Создать конфиг файл builder.toml"
    )
    parser.add_argument("--verbose", action="store_true", help="Подробный лог")

    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    # Инициализация конфига
    if args.init_config:
        config = BuilderConfig(
            source=args.source,
            output_dir=args.output or DEFAULT_OUTPUT_DIR,
            service_name=args.service_name or "ApiService",
        )
        config.save_to_file(args.config or "builder.toml")
        print(f"✅ Создан конфиг файл {args.config or 'builder.toml'}")
        return

    config = _resolve_config(args)
    if config is None:
        print("❌ Ошибка: Укажите --source или создайте конфиг с --init-config")
        sys.exit(1)

    if not config.source:
        print("❌ Ошибка: источник не указан ни в конфиге, ни в аргументах")
        sys.exit(1)

    try:
        builder = _generate_core(config)

        print("⚙️ Генерация кода...")
        result: GenerationResult = builder.generate()
        print(f"🧩 Интерфейсов: {len(result.registry)}, методов: {len(result.api_list)}")

        project = builder.build_project(
            result, service_name=config.service_name, base_url=config.base_url
        )
        save_project(project, config.output_dir or DEFAULT_OUTPUT_DIR)

    except (LoadError, DocumentError) as e:
        print(f"❌ Ошибка генерации: {e}")
        sys.exit(1)

    if args.serve:
        print(f"🌐 Сервер: http://{config.host}:{config.port}")
        run_server(result, host=config.host, port=config.port)


if __name__ == "__main__":
    generate()
