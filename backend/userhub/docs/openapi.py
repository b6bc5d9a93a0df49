"""Builds a minimal OpenAPI spec from existing Pydantic schemas."""
from __future__ import annotations

from typing import Any, Dict

from flask import request

from ..api.users.schemas import UserCreateIn, UserOut


def _schemas() -> Dict[str, Any]:
    error = {
        "type": "object",
        "required": ["error", "message"],
        "properties": {
            "error": {"type": "string"},
            "message": {"type": "string"},
            "details": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {"field": {"type": "string"}, "message": {"type": "string"}},
                },
            },
        },
    }
    return {
        "UserCreateIn": UserCreateIn.model_json_schema(ref_template="#/components/schemas/{model}"),
        "UserOut": UserOut.model_json_schema(ref_template="#/components/schemas/{model}"),
        "Error": error,
    }


def _json(ref: str) -> Dict[str, Any]:
    return {"application/json": {"schema": {"$ref": f"#/components/schemas/{ref}"}}}


def _error(description: str) -> Dict[str, Any]:
    return {"description": description, "content": _json("Error")}


def build_openapi() -> Dict[str, Any]:
    base_url = f"{request.scheme}://{request.host}"
    return {
        "openapi": "3.0.3",
        "info": {"title": "userhub API", "version": "0.1.0"},
        "servers": [{"url": base_url}],
        "tags": [
            {"name": "Health"},
            {"name": "Users"},
        ],
        "paths": {
            "/health": {
                "get": {"tags": ["Health"], "summary": "Liveness probe", "responses": {"200": {"description": "OK"}}}
            },
            "/health/db": {
                "get": {
                    "tags": ["Health"], "summary": "Database connectivity",
                    "responses": {"200": {"description": "OK"}, "503": _error("Database unavailable")},
                }
            },
            "/users": {
                "get": {
                    "tags": ["Users"], "summary": "List users",
                    "responses": {
                        "200": {
                            "description": "All users",
                            "content": {
                                "application/json": {
                                    "schema": {"type": "array", "items": {"$ref": "#/components/schemas/UserOut"}}
                                }
                            },
                        },
                        "503": _error("Database unavailable"),
                    },
                },
                "post": {
                    "tags": ["Users"], "summary": "Create user",
                    "requestBody": {"required": True, "content": _json("UserCreateIn")},
                    "responses": {
                        "201": {"description": "Created", "content": _json("UserOut")},
                        "400": _error("Validation failed"),
                        "409": _error("Email already exists"),
                        "503": _error("Database unavailable"),
                    },
                },
            },
        },
        "components": {
            "schemas": _schemas(),
        },
    }
