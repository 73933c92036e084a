"""Tests for the Mangum Lambda handler."""

from __future__ import annotations


class TestMangumHandler:
    """Tests for the Mangum Lambda handler."""

    def test_handler_is_mangum_instance(self) -> None:
        """Handler is a Mangum instance wrapping the FastAPI app."""
        from mangum import Mangum

        from country_explorer.mangum_handler import handler

        assert isinstance(handler, Mangum)

    def test_handler_has_lifespan_off(self) -> None:
        """Handler is configured with lifespan='off'."""
        from country_explorer.mangum_handler import handler

        assert handler.lifespan == "off"

    def test_handler_app_has_routes(self) -> None:
        """Handler app exposes the country and news routes."""
        from fastapi import FastAPI

        from country_explorer.mangum_handler import handler

        assert isinstance(handler.app, FastAPI)
        routes = [route.path for route in handler.app.routes]
        for path in (
            "/health",
            "/api/countries",
            "/api/countries/{name}",
            "/api/countries/code/{code}",
            "/api/countries/code/{code}/deep",
            "/api/news",
            "/api/explore",
        ):
            assert path in routes
