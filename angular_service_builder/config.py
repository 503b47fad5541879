"""
Конфигурация генератора Angular сервиса
"""

import os
from typing import Optional
import toml
from dataclasses import dataclass

CONFIG_NAME = "builder.toml"


@dataclass
class BuilderConfig:
    """Конфигурация генератора"""

    source: Optional[str] = None
    output_dir: Optional[str] = None
    service_name: str = "ApiService"
    base_url: str = ""
    host: str = "127.0.0.1"
    port: int = 8080

    @classmethod
    def from_file(
        cls, config_path: str = CONFIG_NAME, search_dir: str = None
    ) -> Optional["BuilderConfig"]:
        """Загрузка конфигурации из файла"""
        # Если указана директория для поиска, ищем конфиг там
        if search_dir and os.path.isdir(search_dir):
            config_in_dir = os.path.join(search_dir, CONFIG_NAME)
            if os.path.exists(config_in_dir):
                config_path = config_in_dir

        if not os.path.exists(config_path):
            return None

        try:
            config_data = toml.load(config_path)
            port = int(config_data.get("port", 8080))
        except (OSError, toml.TomlDecodeError, TypeError, ValueError):
            return None

        return cls(
            source=config_data.get("source"),
            output_dir=config_data.get("output_dir", "generated"),
            service_name=config_data.get("service_name", "ApiService"),
            base_url=config_data.get("base_url", ""),
            host=config_data.get("host", "127.0.0.1"),
            port=port,
        )

    def save_to_file(self, config_path: str = CONFIG_NAME) -> None:
        """Сохранение конфигурации в файл"""
        config_data = {
            "source": self.source,
            "output_dir": self.output_dir,
            "service_name": self.service_name,
            "base_url": self.base_url,
            "host": self.host,
            "port": self.port,
        }

        # toml не сохраняет None
        with open(config_path, "w") as f:
            toml.dump({k: v for k, v in config_data.items() if v is not None}, f)

    def merge_with_args(self, args) -> "BuilderConfig":
        """Объединение с аргументами командной строки"""
        return BuilderConfig(
            source=args.source or self.source,
            output_dir=args.output or self.output_dir,
            service_name=getattr(args, "service_name", None) or self.service_name,
            base_url=self.base_url,
            host=getattr(args, "host", None) or self.host,
            port=getattr(args, "port", None) or self.port,
        )
