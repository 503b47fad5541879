"""
HTML страница со списком методов API и их DTO (aiohttp)
"""

import html
import logging
from urllib.parse import quote

from aiohttp import web

from .generator import GenerationResult
from .internal.generator.service_generator import render_method
from .internal.generator.templates import templates

logger = logging.getLogger(__name__)

RESULT_KEY = web.AppKey("result", GenerationResult)

PAGE_TITLE = "Angular Service Code and DTO Interfaces"


def render_index(result: GenerationResult) -> str:
    items = "\n".join(
        templates.index_item.format(
            name=html.escape(call_site.function_name),
            query=html.escape(quote(call_site.function_name)),
            path=html.escape(call_site.path),
        )
        for call_site in result.api_list
    )

    return templates.index_page.format(title=PAGE_TITLE, items=items)


def render_api_detail(result: GenerationResult, function_name: str) -> str:
    call_site = result.find_call_site(function_name)
    if call_site is None:
        raise web.HTTPNotFound(text="API not found")

    dtos = result.collect_dtos(call_site)

    return templates.api_detail.format(
        name=html.escape(call_site.function_name),
        method=html.escape(render_method(call_site)),
        dtos=(
            "\n".join(templates.dto_block.format(dto=html.escape(_)) for _ in dtos)
            if dtos
            else templates.no_dtos
        ),
    )


async def index(request: web.Request) -> web.Response:
    """Главная страница со списком методов"""
    return web.Response(
        text=render_index(request.app[RESULT_KEY]), content_type="text/html"
    )


async def api_detail(request: web.Request) -> web.Response:
    """Фрагмент с кодом метода и связанными DTO"""
    function_name = request.query.get("api", "")
    logger.debug("Запрошен метод %s", function_name)

    return web.Response(
        text=render_api_detail(request.app[RESULT_KEY], function_name),
        content_type="text/html",
    )


def create_app(result: GenerationResult) -> web.Application:
    """
    Приложение поверх готового результата генерации.

    Результат вычисляется один раз до старта и далее только читается.
    """
    app = web.Application()
    app[RESULT_KEY] = result
    app.router.add_get("/", index)
    app.router.add_get("/api-detail", api_detail)

    return app


def run_server(result: GenerationResult, host: str = "127.0.0.1", port: int = 8080):
    logger.info("Сервер запущен на http://%s:%d", host, port)
    web.run_app(create_app(result), host=host, port=port)
