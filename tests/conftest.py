import pytest


WIDGET_REF = "#/components/schemas/Widget"


def build_widget_spec(extra_parameters=None):
    """Документ с одной операцией getWidgetById"""
    parameters = [
        {"name": "id", "in": "path", "required": True, "schema": {"type": "string"}}
    ]
    parameters.extend(extra_parameters or [])

    return {
        "openapi": "3.0.0",
        "info": {"title": "Widget API", "version": "1.0.0"},
        "paths": {
            "/widgets/{id}": {
                "get": {
                    "operationId": "getWidgetById",
                    "parameters": parameters,
                    "responses": {
                        "200": {
                            "description": "OK",
                            "content": {
                                "application/json": {"schema": {"$ref": WIDGET_REF}}
                            },
                        }
                    },
                }
            }
        },
        "components": {
            "schemas": {
                "Widget": {
                    "type": "object",
                    "properties": {
                        "id": {"type": "string"},
                        "name": {"type": "string"},
                    },
                }
            }
        },
    }


@pytest.fixture
def widget_spec():
    return build_widget_spec()


@pytest.fixture
def widget_spec_with_query():
    return build_widget_spec(
        [
            {
                "name": "filter",
                "in": "query",
                "required": False,
                "schema": {"type": "string"},
            }
        ]
    )


@pytest.fixture
def shop_spec():
    """Документ с вложенными схемами, телом запроса и массивом в ответе"""
    return {
        "openapi": "3.0.0",
        "info": {"title": "Shop API", "version": "2.0.0"},
        "components": {
            "schemas": {
                "Customer": {
                    "type": "object",
                    "properties": {
                        "id": {"type": "integer"},
                        "full_name": {"type": "string"},
                        "address": {
                            "type": "object",
                            "properties": {
                                "city": {"type": "string"},
                                "zip_code": {"type": "string"},
                            },
                        },
                    },
                    "required": ["id"],
                },
                "Order": {
                    "type": "object",
                    "properties": {
                        "id": {"type": "integer"},
                        "customer": {"$ref": "#/components/schemas/Customer"},
                        "lines": {
                            "type": "array",
                            "items": {
                                "type": "object",
                                "properties": {
                                    "sku": {"type": "string"},
                                    "quantity": {"type": "integer"},
                                },
                            },
                        },
                        "is_paid": {"type": "boolean"},
                    },
                },
                "CreateOrderRequest": {
                    "type": "object",
                    "properties": {
                        "customer_id": {"type": "integer"},
                        "skus": {"type": "array", "items": {"type": "string"}},
                    },
                },
            }
        },
        "paths": {
            "/orders": {
                "get": {
                    "operationId": "list_orders",
                    "summary": "List orders",
                    "tags": ["orders"],
                    "parameters": [
                        {
                            "name": "page_size",
                            "in": "query",
                            "required": True,
                            "schema": {"type": "integer"},
                        },
                        {
                            "name": "is_paid",
                            "in": "query",
                            "schema": {"type": "boolean"},
                        },
                    ],
                    "responses": {
                        "200": {
                            "description": "OK",
                            "content": {
                                "application/json": {
                                    "schema": {
                                        "type": "array",
                                        "items": {
                                            "$ref": "#/components/schemas/Order"
                                        },
                                    }
                                }
                            },
                        }
                    },
                },
                "post": {
                    "operationId": "CreateOrder",
                    "tags": ["orders"],
                    "requestBody": {
                        "content": {
                            "application/json": {
                                "schema": {
                                    "$ref": "#/components/schemas/CreateOrderRequest"
                                }
                            }
                        }
                    },
                    "responses": {
                        "200": {
                            "description": "Created",
                            "content": {
                                "application/json": {
                                    "schema": {"$ref": "#/components/schemas/Order"}
                                }
                            },
                        }
                    },
                },
            },
            "/orders/{order_id}": {
                "delete": {
                    "operationId": "delete_order",
                    "parameters": [
                        {
                            "name": "order_id",
                            "in": "path",
                            "required": True,
                            "schema": {"type": "integer"},
                        }
                    ],
                    "responses": {"204": {"description": "Deleted"}},
                }
            },
        },
    }
