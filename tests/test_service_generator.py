"""
Тесты отрисовки методов и файлов Angular сервиса
"""

from angular_service_builder.config import BuilderConfig
from angular_service_builder.generator import ServiceBuilder
from angular_service_builder.internal.generator.service_generator import (
    ServiceGenerator,
    render_method,
)
from angular_service_builder.internal.types.models import CallSite
from angular_service_builder.internal.types.registry import InterfaceRegistry


class TestRenderMethod:
    """Тесты отрисовки одного метода"""

    def test_path_parameter_only(self, widget_spec):
        """Тест метода с path параметром"""
        (call_site,) = ServiceBuilder(widget_spec).generate().api_list

        assert render_method(call_site) == (
            "getWidgetById(id: string): Observable<Widget> {\n"
            "  return this.http.get<Widget>(`${this.baseUrl()}/widgets/${id}`);\n"
            "}\n"
        )

    def test_query_parameters(self, widget_spec_with_query):
        """Тест метода с query параметрами: интерфейс перед методом"""
        (call_site,) = ServiceBuilder(widget_spec_with_query).generate().api_list

        assert render_method(call_site) == (
            "export interface getWidgetByIdQueryParams {\n"
            "  filter?: string;\n"
            "}\n"
            "\n"
            "getWidgetById(id: string, queryParams: getWidgetByIdQueryParams): Observable<Widget> {\n"
            "  const params = httpParamBuilder(queryParams);\n"
            "  return this.http.get<Widget>(`${this.baseUrl()}/widgets/${id}`, { params });\n"
            "}\n"
        )

    def test_payload(self):
        """Тест метода с телом запроса"""
        call_site = CallSite(
            function_name="createWidget",
            payload_type="Widget",
            response_type="Widget",
            path="/widgets",
            http_method="post",
        )

        assert render_method(call_site) == (
            "createWidget(payload: Widget): Observable<Widget> {\n"
            "  return this.http.post<Widget>(`${this.baseUrl()}/widgets`, payload);\n"
            "}\n"
        )

    def test_all_parameter_kinds(self):
        """Тест порядка аргументов: path, queryParams, payload"""
        call_site = CallSite(
            function_name="updateWidget",
            parameters="id: string, queryParams: updateWidgetQueryParams",
            query_param_interface="export interface updateWidgetQueryParams {\n  force?: boolean;\n}\n",
            payload_type="Widget",
            path="/widgets/${id}",
            has_query_params=True,
            http_method="PUT",
        )

        method = render_method(call_site)

        assert (
            "updateWidget(id: string, queryParams: updateWidgetQueryParams, payload: Widget): "
            "Observable<void> {" in method
        )
        assert (
            "return this.http.put<void>(`${this.baseUrl()}/widgets/${id}`, payload, { params });"
            in method
        )


class TestServiceGenerator:
    """Тесты сборки файлов"""

    def test_project_files(self, shop_spec):
        """Тест состава и содержимого файлов"""
        builder = ServiceBuilder(shop_spec, source_url="http://localhost:8000")
        project = builder.build_project(service_name="ShopService", base_url="/api")

        assert [_.file_name for _ in project.files] == [
            "dtos.ts",
            "api.service.ts",
            "builder.toml",
        ]

        dtos = str(project.get_file("dtos.ts"))
        assert dtos.startswith("// Auto-generated DTO interfaces")
        for name in ["Customer", "Order", "CreateOrderRequest", "addressDTO", "linesDTO"]:
            assert f"export interface {name} {{" in dtos

        service = str(project.get_file("api.service.ts"))
        assert "import { Observable } from 'rxjs';" in service
        assert (
            "import { CreateOrderRequest, Customer, Order, addressDTO, linesDTO } from './dtos';"
            in service
        )
        assert "export interface listOrdersQueryParams {\n  pageSize: number;\n  isPaid?: boolean;\n}\n" in service
        assert "export class ShopService {" in service
        assert "    return '/api';" in service
        assert "  listOrders(queryParams: listOrdersQueryParams): Observable<Order[]> {\n" in service
        assert "  createOrder(payload: CreateOrderRequest): Observable<Order> {\n" in service
        assert "  deleteOrder(orderId: number): Observable<void> {\n" in service
        assert "    return this.http.delete<void>(`${this.baseUrl()}/orders/${orderId}`);\n" in service
        assert service.rstrip().endswith("}")

        config = str(project.get_file("builder.toml"))
        assert 'source = "http://localhost:8000"' in config

    def test_without_source_and_dtos(self):
        """Тест: без источника нет builder.toml, без DTO нет импорта"""
        call_site = CallSite(function_name="ping", path="/ping", http_method="get")

        project = ServiceGenerator(InterfaceRegistry(), [call_site]).generate()

        assert [_.file_name for _ in project.files] == ["dtos.ts", "api.service.ts"]
        service = str(project.get_file("api.service.ts"))
        assert "from './dtos'" not in service
        assert "export class ApiService {" in service
        assert "  ping(): Observable<void> {" in service

    def test_config_file_round_trip(self, tmp_path):
        """Тест: builder.toml с обратными слэшами и кавычками читается обратно"""
        source = 'C:\\specs\\"api".json'
        call_site = CallSite(function_name="ping", path="/ping", http_method="get")

        project = ServiceGenerator(
            InterfaceRegistry(), [call_site], source_url=source
        ).generate()
        config_path = tmp_path / "builder.toml"
        config_path.write_text(str(project.get_file("builder.toml")), encoding="utf-8")

        loaded = BuilderConfig.from_file(str(config_path))

        assert loaded is not None
        assert loaded.source == source
