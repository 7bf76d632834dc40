"""OpenAPI Metadata — tags, Swagger UI options and per-route documentation.

Invariants:
    - Documentation is descriptive only; nothing here affects request handling
    - Path parameters and request bodies are declared explicitly because the
      pipeline endpoints read them from the raw request
"""

from pydantic import BaseModel

from product_api.schemas.product import (
    ErrorEnvelope,
    MessageEnvelope,
    ProductEnvelope,
    ProductListEnvelope,
    ValidationErrorEnvelope,
)

API_TITLE = "REST API - Products"
API_VERSION = "1.0.0"
API_DESCRIPTION = "API Docs for products"

OPENAPI_TAGS = [
    {
        "name": "Products",
        "description": "API operation related to products",
    },
    {
        "name": "health",
        "description": "Liveness and readiness probes",
    },
]

SWAGGER_UI_PARAMETERS = {
    "docExpansion": "list",
    "defaultModelsExpandDepth": 1,
}


def id_parameter(description: str) -> dict:
    return {
        "in": "path",
        "name": "id",
        "description": description,
        "required": True,
        "schema": {"type": "integer"},
    }


def json_request_body(model: type[BaseModel]) -> dict:
    return {
        "required": True,
        "content": {
            "application/json": {"schema": model.model_json_schema()},
        },
    }


# ─── Response blocks ─────────────────────────────────────────────

LIST_RESPONSES = {
    200: {"model": ProductListEnvelope, "description": "Successful response"},
}

PRODUCT_RESPONSES = {
    200: {"model": ProductEnvelope, "description": "Successful response"},
    400: {"model": ValidationErrorEnvelope, "description": "Bad Request - Invalid ID"},
    404: {"model": ErrorEnvelope, "description": "Not Found"},
}

CREATE_RESPONSES = {
    201: {"model": ProductEnvelope, "description": "Successful response"},
    400: {
        "model": ValidationErrorEnvelope,
        "description": "Bad request - Invalid input data",
    },
}

UPDATE_RESPONSES = {
    **PRODUCT_RESPONSES,
    400: {
        "model": ValidationErrorEnvelope,
        "description": "Bad Request - Invalid ID or Invalid input data",
    },
}

DELETE_RESPONSES = {
    **PRODUCT_RESPONSES,
    200: {"model": MessageEnvelope, "description": "Successful response"},
}
