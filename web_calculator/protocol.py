from typing import Optional

from pydantic import BaseModel, Field

from web_calculator.arithmetic import INT64_MAX, INT64_MIN, add, parse_operand

WELCOME_TEXT = (
    "Простое веб-приложение калькулятор!\n"
    "Используйте /add?a=5&b=3 для сложения.\n"
)
INVALID_OPERANDS_MESSAGE = "Пожалуйста, предоставьте два корректных числа."
RESULT_TEMPLATE = "Результат: {result}"


class AdditionPayload(BaseModel):
    a: int = Field(..., description="First number")
    b: int = Field(..., description="Second number")

    @classmethod
    def from_query(
        cls,
        a: Optional[str],
        b: Optional[str],
        minimum: int = INT64_MIN,
        maximum: int = INT64_MAX,
    ) -> "AdditionPayload":
        """Build a payload from raw query values, raising InvalidOperandError."""
        return cls(
            a=parse_operand("a", a, minimum, maximum),
            b=parse_operand("b", b, minimum, maximum),
        )

    def compute(self) -> "AdditionResponse":
        return AdditionResponse(result=add(self.a, self.b))


class AdditionResponse(BaseModel):
    result: int = Field(..., description="Sum of a and b")

    def render(self) -> str:
        return RESULT_TEMPLATE.format(result=self.result)
