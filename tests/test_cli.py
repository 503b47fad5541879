"""
Тесты командной строки
"""

import json

import pytest

from angular_service_builder import cli
from angular_service_builder.config import BuilderConfig


@pytest.fixture
def spec_file(tmp_path, shop_spec):
    path = tmp_path / "swagger.json"
    path.write_text(json.dumps(shop_spec), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def work_dir(tmp_path, monkeypatch):
    """Каждый тест в своей директории, без чужого builder.toml"""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestGenerateCommand:
    """Тесты команды генерации"""

    def test_generate_files(self, spec_file, work_dir, capsys):
        """Тест генерации файлов в директорию"""
        output = work_dir / "out"

        cli.generate(["--source", str(spec_file), "--output", str(output)])

        assert (output / "dtos.ts").exists()
        assert (output / "api.service.ts").exists()
        assert (output / "builder.toml").exists()
        assert "export interface Order {" in (output / "dtos.ts").read_text(encoding="utf-8")
        assert "✅ Генерация завершена успешно!" in capsys.readouterr().out

    def test_service_name_argument(self, spec_file, work_dir):
        """Тест имени класса сервиса"""
        cli.generate(["--source", str(spec_file), "--service-name", "ShopService"])

        service = (work_dir / "generated" / "api.service.ts").read_text(encoding="utf-8")
        assert "export class ShopService {" in service

    def test_config_file_is_used(self, spec_file, work_dir):
        """Тест генерации по builder.toml"""
        BuilderConfig(source=str(spec_file), output_dir="from_config").save_to_file(
            "builder.toml"
        )

        cli.generate([])

        assert (work_dir / "from_config" / "dtos.ts").exists()

    def test_init_config(self, work_dir, capsys):
        """Тест создания конфига"""
        cli.generate(["--init-config", "--source", "swagger.json"])

        config = BuilderConfig.from_file("builder.toml")
        assert config.source == "swagger.json"
        assert config.output_dir == "generated"
        assert "✅ Создан конфиг файл builder.toml" in capsys.readouterr().out

    def test_missing_source(self, capsys):
        """Тест: без источника и конфига - ошибка"""
        with pytest.raises(SystemExit) as exc_info:
            cli.generate([])

        assert exc_info.value.code == 1
        assert "❌" in capsys.readouterr().out

    def test_broken_document(self, work_dir, capsys):
        """Тест некорректного документа"""
        path = work_dir / "broken.json"
        path.write_text(json.dumps({"paths": []}), encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            cli.generate(["--source", str(path)])

        assert exc_info.value.code == 1
        assert "❌ Ошибка генерации" in capsys.readouterr().out

    def test_unreadable_source(self, work_dir):
        """Тест битого JSON"""
        path = work_dir / "broken.json"
        path.write_text("{", encoding="utf-8")

        with pytest.raises(SystemExit):
            cli.generate(["--source", str(path)])

    def test_serve(self, spec_file, monkeypatch):
        """Тест запуска сервера после генерации"""
        calls = []
        monkeypatch.setattr(
            cli, "run_server", lambda result, host, port: calls.append((result, host, port))
        )

        cli.generate(["--source", str(spec_file), "--serve", "--port", "9000"])

        (result, host, port) = calls[0]
        assert host == "127.0.0.1"
        assert port == 9000
        assert result.find_call_site("listOrders") is not None
