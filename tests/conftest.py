"""
pytest configuration and fixtures.
"""

import pytest
from fastapi.testclient import TestClient

from web_calculator.protocol import INVALID_OPERANDS_MESSAGE, WELCOME_TEXT
from web_calculator.services.calculator.app import CalculatorService


@pytest.fixture
def service() -> CalculatorService:
    """A fresh calculator service."""
    return CalculatorService()


@pytest.fixture
def client(service: CalculatorService):
    """Test client bound to the calculator app."""
    with TestClient(service.app) as c:
        yield c


@pytest.fixture
def welcome_text() -> str:
    return WELCOME_TEXT


@pytest.fixture
def error_body() -> str:
    """Body of every rejected addition request."""
    return f"{INVALID_OPERANDS_MESSAGE}\n"
