import pytest

from spec_filter.models import Document


@pytest.fixture
def petstore_spec():
    return {
        "openapi": "3.0.1",
        "info": {"title": "Petstore", "version": "1.0.0"},
        "servers": [{"url": "https://petstore.example.com/v1"}],
        "security": [{"api_key": []}],
        "tags": [
            {"name": "pets", "description": "Everything about pets"},
            {"name": "store"},
            {"name": "admin"},
        ],
        "paths": {
            "/pets": {
                "summary": "Pets",
                "get": {
                    "tags": ["pets"],
                    "operationId": "listPets",
                    "parameters": [
                        {"name": "limit", "in": "query", "schema": {"type": "integer", "format": "int32"}},
                        {"name": "status", "in": "query", "schema": {"$ref": "#/components/schemas/Status"}},
                    ],
                    "responses": {
                        "200": {
                            "description": "A list of pets",
                            "content": {
                                "application/json": {
                                    "schema": {"type": "array", "items": {"$ref": "#/components/schemas/Pet"}}
                                }
                            },
                        },
                        "default": {
                            "description": "Unexpected error",
                            "content": {"application/json": {"schema": {"$ref": "#/components/schemas/Error"}}},
                        },
                    },
                },
                "post": {
                    "tags": ["pets", "admin"],
                    "operationId": "createPet",
                    "requestBody": {
                        "required": True,
                        "content": {"application/json": {"schema": {"$ref": "#/components/schemas/NewPet"}}},
                    },
                    "responses": {"201": {"description": "Created"}},
                },
            },
            "/pets/{petId}": {
                "parameters": [{"name": "petId", "in": "path", "required": True, "schema": {"type": "string"}}],
                "get": {
                    "tags": ["pets"],
                    "operationId": "showPetById",
                    "responses": {
                        "200": {
                            "description": "Expected response to a valid request",
                            "content": {"application/json": {"schema": {"$ref": "#/components/schemas/Pet"}}},
                        }
                    },
                },
                "delete": {
                    "tags": ["admin"],
                    "operationId": "deletePet",
                    "x-internal": True,
                    "responses": {"204": {"description": "Deleted"}},
                },
            },
            "/store/inventory": {
                "get": {
                    "tags": ["store"],
                    "operationId": "getInventory",
                    "responses": {
                        "200": {
                            "description": "Inventory",
                            "content": {
                                "application/json": {
                                    "schema": {
                                        "type": "object",
                                        "additionalProperties": {"$ref": "#/components/schemas/StockLevel"},
                                    }
                                }
                            },
                        }
                    },
                }
            },
        },
        "components": {
            "schemas": {
                "Pet": {
                    "type": "object",
                    "required": ["id", "name"],
                    "properties": {
                        "id": {"type": "integer", "format": "int64"},
                        "name": {"type": "string"},
                        "category": {"$ref": "#/components/schemas/Category"},
                        "secret": {"type": "string", "x-internal": True},
                    },
                },
                "NewPet": {"allOf": [{"$ref": "#/components/schemas/Pet"}, {"type": "object"}]},
                "Category": {"type": "object", "properties": {"name": {"type": "string"}}},
                "Status": {"type": "string", "enum": ["available", "sold"]},
                "StockLevel": {"type": "integer"},
                "Error": {
                    "type": "object",
                    "properties": {"code": {"type": "integer"}, "message": {"type": "string"}},
                },
                "Unused": {"type": "object", "properties": {"value": {"type": "string"}}},
            },
            "securitySchemes": {"api_key": {"type": "apiKey", "name": "api_key", "in": "header"}},
        },
    }


@pytest.fixture
def petstore(petstore_spec):
    return Document.from_dict(petstore_spec)
