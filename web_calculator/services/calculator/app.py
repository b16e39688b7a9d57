from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from loguru import logger
from typing import Dict, Optional

from web_calculator.arithmetic import InvalidOperandError
from web_calculator.protocol import (
    AdditionPayload,
    INVALID_OPERANDS_MESSAGE,
    WELCOME_TEXT,
)
from web_calculator.settings import SETTINGS


class CalculatorService:
    def __init__(self):
        self.app = FastAPI(title="Web Calculator Service")
        self.settings = SETTINGS.calculator
        self.setup_routes()
        self.setup_exception_handlers()

    def setup_routes(self):
        # No method list: TRACE and extension methods reach these handlers too.
        self.app.add_route(self.settings.add_route, self.add, methods=None)
        self.app.add_api_route(
            self.settings.health_route,
            self.health_check,
            methods=["GET"],
            status_code=200,
            tags=["health"],
            description="Service health check endpoint",
        )
        self.app.add_route(self.settings.root_route, self.welcome, methods=None)
        # Any other path falls through to the welcome text.
        self.app.add_route("/{subpath:path}", self.welcome, methods=None)

    def setup_exception_handlers(self):
        self.app.add_exception_handler(
            InvalidOperandError, self.invalid_operand_handler
        )

    async def invalid_operand_handler(
        self, request: Request, exc: InvalidOperandError
    ) -> PlainTextResponse:
        logger.debug(f"Rejected {request.url.path} request: {exc}")
        return PlainTextResponse(
            content=f"{INVALID_OPERANDS_MESSAGE}\n",
            status_code=400,
            headers={"X-Content-Type-Options": "nosniff"},
        )

    async def welcome(self, request: Request) -> PlainTextResponse:
        """Return the fixed usage text"""
        return PlainTextResponse(WELCOME_TEXT)

    async def add(self, request: Request) -> PlainTextResponse:
        """
        Sum the query parameters a and b.
        Repeated parameters use their first value.
        """
        payload = AdditionPayload.from_query(
            a=self._first_query_value(request, "a"),
            b=self._first_query_value(request, "b"),
            minimum=self.settings.operand_min,
            maximum=self.settings.operand_max,
        )
        return PlainTextResponse(payload.compute().render())

    def _first_query_value(self, request: Request, name: str) -> Optional[str]:
        values = request.query_params.getlist(name)
        return values[0] if values else None

    async def health_check(self) -> Dict[str, str]:
        """Simple health check endpoint"""
        return {"status": "healthy"}


service = CalculatorService()
app = service.app
