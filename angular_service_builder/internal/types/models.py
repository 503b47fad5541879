from typing import Optional, Union, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

HTTP_METHODS = ("get", "put", "post", "delete", "patch", "head", "options", "trace")


class Schema(BaseModel):
    """Узел схемы OpenAPI (поддерживаемое подмножество)"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    type: str = ""
    format: str = ""
    ref: str = Field(default="", alias="$ref")
    items: Optional["Schema"] = None
    properties: Dict[str, "Schema"] = {}
    required: List[str] = []
    description: str = ""

    @field_validator("type", mode="before")
    def type_check(cls, value):
        # OpenAPI 3.1: ["string", "null"] -> "string"
        if isinstance(value, list):
            value = next((_ for _ in value if _ != "null"), "")

        return value or ""

    @field_validator("format", "ref", "description", mode="before")
    def text_check(cls, value):
        return value if isinstance(value, str) else ""

    @field_validator("items", mode="before")
    def items_check(cls, value):
        return value if isinstance(value, (dict, Schema)) else None

    @field_validator("properties", mode="before")
    def properties_check(cls, value):
        return value if isinstance(value, dict) else {}

    @field_validator("required", mode="before")
    def required_check(cls, value):
        # Swagger 2 допускает `required: true` на уровне свойства
        return value if isinstance(value, list) else []


Schema.model_rebuild()


class Parameter(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str
    location: str = Field(default="", alias="in")
    required: bool = False
    schema_: Schema = Field(default_factory=Schema, alias="schema")

    @model_validator(mode="before")
    @classmethod
    def inline_schema_check(cls, data):
        # Swagger 2: тип описан прямо в параметре, без вложенной schema
        if isinstance(data, dict) and "schema" not in data and "type" in data:
            data = {
                **data,
                "schema": {
                    key: data[key] for key in ("type", "format", "items") if key in data
                },
            }

        return data

    @field_validator("required", mode="before")
    def required_check(cls, value):
        return bool(value)


class MediaType(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    schema_: Schema = Field(default_factory=Schema, alias="schema")


class RequestBody(BaseModel):
    model_config = ConfigDict(extra="ignore")

    description: str = ""
    content: Dict[str, MediaType] = {}
    required: bool = False


class Response(BaseModel):
    model_config = ConfigDict(extra="ignore")

    description: str = ""
    content: Dict[str, MediaType] = {}


class Operation(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    operation_id: str = Field(default="", alias="operationId")
    summary: str = ""
    tags: List[str] = []
    parameters: List[Parameter] = []
    request_body: Optional[RequestBody] = Field(default=None, alias="requestBody")
    responses: Dict[str, Response] = {}

    @field_validator("responses", mode="before")
    def responses_check(cls, value):
        # YAML-источники дают числовые коды ответов
        if isinstance(value, dict):
            return {str(code): response for code, response in value.items()}

        return value


class Components(BaseModel):
    model_config = ConfigDict(extra="ignore")

    schemas: Dict[str, Schema] = {}


class OpenAPI(BaseModel):
    """Документ OpenAPI: пути и именованные схемы"""

    model_config = ConfigDict(extra="ignore")

    paths: Dict[str, Dict[str, Operation]] = {}
    components: Components = Components()

    @field_validator("paths", mode="before")
    def paths_check(cls, value):
        if not isinstance(value, dict):
            return value

        paths = {}
        for path, path_spec in value.items():
            if not isinstance(path_spec, dict):
                paths[path] = path_spec
                continue

            shared_parameters = path_spec.get("parameters", [])
            operations = {}

            for method, method_spec in path_spec.items():
                if method.lower() not in HTTP_METHODS:
                    continue

                if shared_parameters and isinstance(method_spec, dict):
                    method_spec = cls._merge_parameters(method_spec, shared_parameters)

                operations[method.lower()] = method_spec

            paths[path] = operations

        return paths

    @staticmethod
    def _merge_parameters(method_spec: Dict, shared_parameters: List) -> Dict:
        """Параметры уровня пути, не переопределенные операцией, идут первыми"""
        own = method_spec.get("parameters", [])
        own_keys = {
            (_.get("name"), _.get("in")) for _ in own if isinstance(_, dict)
        }
        inherited = [
            _
            for _ in shared_parameters
            if isinstance(_, dict) and (_.get("name"), _.get("in")) not in own_keys
        ]

        return {**method_spec, "parameters": inherited + list(own)}


class CallSite(BaseModel):
    """Данные для отрисовки типизированного метода клиента по одной операции"""

    function_name: str
    parameters: str = ""
    query_param_interface: str = ""
    response_type: str = "void"
    payload_type: str = ""
    path: str
    has_query_params: bool = False
    http_method: str

    original_path: str = ""
    summary: str = ""
    tags: List[str] = []


class CodeBlock(BaseModel):
    order: int = 0
    code: str = ""

    def __str__(self):
        return self.code.replace("\t", "  ")


class CodeFile(BaseModel):
    file_name: str

    imports: List[str] = []
    code_blocks: List[CodeBlock] = []

    def __str__(self):
        return "\n\n".join(
            filter(
                bool,
                [
                    ("\n".join(self.imports) if self.imports else ""),
                    "\n".join(
                        map(
                            str,
                            sorted(self.code_blocks, key=lambda x: x.order, reverse=True),
                        )
                    ),
                ],
            )
        )

    def add_code_block(
        self, code_block: Union["CodeBlock", str], **kwargs
    ) -> "CodeFile":
        if isinstance(code_block, str):
            code_block = CodeBlock(code=code_block, **kwargs)

        self.code_blocks.append(code_block)
        return self


class Project(BaseModel):
    name: str
    files: List[CodeFile] = []

    def add_file(self, file_name: Union["CodeFile", str], **kwargs) -> "CodeFile":
        code_file = file_name
        if isinstance(file_name, str):
            code_file = CodeFile(file_name=file_name, **kwargs)

        self.files.append(code_file)
        return code_file

    def get_file(self, file_name: str) -> Optional[CodeFile]:
        for code_file in self.files:
            if code_file.file_name == file_name:
                return code_file

        return None
