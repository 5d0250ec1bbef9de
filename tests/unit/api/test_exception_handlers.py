"""Unit tests for exception handlers."""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from api.exception_handlers import setup_exception_handlers
from core.exceptions import DuplicateEmailError, ProfileNotFoundError


def _create_test_app() -> FastAPI:
    app = FastAPI()
    setup_exception_handlers(app)
    return app


async def _get(app: FastAPI, path: str):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        return await c.get(path)


class TestExceptionHandlers:
    @pytest.mark.asyncio
    async def test_app_exception_returns_error_code_and_message(self) -> None:
        app = _create_test_app()

        @app.get("/raise-app")
        async def _() -> None:
            raise ProfileNotFoundError(42)

        response = await _get(app, "/raise-app")

        assert response.status_code == 404
        body = response.json()
        assert body["error_code"] == "PROFILE_NOT_FOUND"
        assert "42" in body["message"]
        assert body["details"]["profile_id"] == 42

    @pytest.mark.asyncio
    async def test_duplicate_email_returns_409(self) -> None:
        app = _create_test_app()

        @app.get("/raise-dup")
        async def _() -> None:
            raise DuplicateEmailError("ada@example.com")

        response = await _get(app, "/raise-dup")

        assert response.status_code == 409
        assert response.json()["error_code"] == "DUPLICATE_EMAIL"

    @pytest.mark.asyncio
    async def test_http_exception_returns_standard_format(self) -> None:
        from starlette.exceptions import HTTPException

        app = _create_test_app()

        @app.get("/raise-http")
        async def _() -> None:
            raise HTTPException(status_code=403, detail="Forbidden")

        response = await _get(app, "/raise-http")

        assert response.status_code == 403
        body = response.json()
        assert body["error_code"] == "HTTP_ERROR"
        assert body["message"] == "Forbidden"

    @pytest.mark.asyncio
    async def test_unknown_route_uses_standard_format(self) -> None:
        response = await _get(_create_test_app(), "/nowhere")

        assert response.status_code == 404
        assert response.json()["error_code"] == "HTTP_ERROR"

    @pytest.mark.asyncio
    async def test_validation_error_returns_400_with_field_details(self) -> None:
        from pydantic import BaseModel, Field

        app = _create_test_app()

        class Body(BaseModel):
            name: str = Field(..., min_length=2)

        @app.post("/validate")
        async def _(body: Body) -> dict[str, bool]:
            return {"ok": True}

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            response = await c.post("/validate", json={"name": "x"})

        assert response.status_code == 400
        body = response.json()
        assert body["error_code"] == "VALIDATION_ERROR"
        assert isinstance(body["details"], list)
        assert body["details"][0]["field"] == "body.name"

    @pytest.mark.asyncio
    async def test_malformed_query_param_returns_400(self) -> None:
        app = _create_test_app()

        @app.get("/numbers")
        async def _(page: int = 1) -> dict[str, int]:
            return {"page": page}

        response = await _get(app, "/numbers?page=abc")

        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == "query.page"

    @pytest.mark.asyncio
    async def test_operational_error_returns_503(self) -> None:
        app = _create_test_app()

        @app.get("/db-down")
        async def _() -> None:
            raise OperationalError("SELECT 1", {}, Exception("connection refused"))

        response = await _get(app, "/db-down")

        assert response.status_code == 503
        body = response.json()
        assert body["error_code"] == "SERVICE_UNAVAILABLE"
        assert "connection refused" not in body["message"]

    @pytest.mark.asyncio
    async def test_pool_timeout_returns_503(self) -> None:
        app = _create_test_app()

        @app.get("/pool-exhausted")
        async def _() -> None:
            raise PoolTimeoutError("QueuePool limit reached")

        response = await _get(app, "/pool-exhausted")

        assert response.status_code == 503
        assert response.json()["error_code"] == "SERVICE_UNAVAILABLE"

    @pytest.mark.asyncio
    async def test_unhandled_exception_returns_generic_500(self) -> None:
        app = _create_test_app()

        mock_request = MagicMock()
        mock_request.state.request_id = "test-req-id"

        exc = RuntimeError("secret stack detail")

        handler = app.exception_handlers.get(Exception)
        assert handler is not None, "Global exception handler not registered"

        response = await handler(mock_request, exc)  # type: ignore[misc]

        assert response.status_code == 500
        body = json.loads(response.body)
        assert body["error_code"] == "INTERNAL_ERROR"
        assert body["message"] == "An unexpected error occurred"
        assert "secret" not in body["message"]
        assert body["details"]["request_id"] == "test-req-id"
