"""Pydantic models for operands, operation results and API payloads."""
from decimal import ROUND_HALF_UP, Decimal
import json
import re
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from arithmetic_web_server.common.arithmetic import OPERATIONS, Number

APPLICATION_NAME: str = "arithmetic-web-server"
APPLICATION_VERSION: str = "1.0.0"

INVALID_NUMBERS_MESSAGE: str = "Invalid numbers provided"

# Operands are limited to the signed 32-bit range
INT32_MIN: int = -(2**31)
INT32_MAX: int = 2**31 - 1

# Optional sign followed by ASCII digits only (no whitespace, underscores or unicode digits)
_DECIMAL_INTEGER = re.compile(r"[+-]?[0-9]+")

_TWO_PLACES = Decimal("0.01")


class InvalidOperandError(ValueError):
    """Raised when a path segment is not a valid base-10 integer operand."""

    def __init__(self, message: str = INVALID_NUMBERS_MESSAGE) -> None:
        super().__init__(message)


def format_result(value: Number) -> str:
    """
    Render an operation result as a JSON number literal.

    Integers are written as-is. Floats are written with exactly two decimals,
    using the shortest decimal form of the float, half-up (e.g. 10.0 -> 10.00, 1.005 -> 1.01).

    :param Number value: Result to render

    :return: JSON number literal
    :rtype: str
    """
    if isinstance(value, bool):
        raise TypeError("Boolean is not a valid operation result")
    if isinstance(value, int):
        return str(value)
    return str(Decimal(repr(value)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


class Operands(BaseModel):
    """Pair of integer operands parsed from the request path."""

    model_config = ConfigDict(frozen=True)

    a: int = Field(..., ge=INT32_MIN, le=INT32_MAX, description="Left operand")
    b: int = Field(..., ge=INT32_MIN, le=INT32_MAX, description="Right operand")

    @field_validator("a", "b", mode="before")
    @classmethod
    def must_be_decimal_integer(cls, v):
        """Accept only strictly formatted base-10 integer strings (or ints)."""
        if isinstance(v, bool):
            raise ValueError("Boolean is not a valid operand")
        if isinstance(v, str):
            if not _DECIMAL_INTEGER.fullmatch(v):
                raise ValueError(f"Not a base-10 integer: {v!r}")
            return int(v)
        return v

    @classmethod
    def from_path(cls, a: str, b: str) -> "Operands":
        """
        Build operands from raw path segments.

        :param str a: Raw left segment
        :param str b: Raw right segment

        :return: Validated operands
        :rtype: Operands
        :raises InvalidOperandError: If either segment is not a valid integer
        """
        try:
            return cls(a=a, b=b)
        except ValidationError as exc:
            raise InvalidOperandError() from exc


class OperationResult(BaseModel):
    """Result of one arithmetic operation, as returned by the API."""

    model_config = ConfigDict(frozen=True)

    operation: str = Field(..., description="Operation name")
    a: int = Field(..., description="Left operand")
    b: int = Field(..., description="Right operand")
    result: Union[int, float] = Field(..., description="Integer, or float for divide")

    @field_validator("operation")
    @classmethod
    def operation_must_be_known(cls, v: str) -> str:
        """Ensure the operation is one the API exposes."""
        if v not in OPERATIONS:
            raise ValueError(f"Unknown operation: {v!r}")
        return v

    def to_json(self) -> str:
        """Serialize to compact JSON, keeping the two-decimal rendering of divide results."""
        return (
            f'{{"operation":{json.dumps(self.operation)},'
            f'"a":{self.a},"b":{self.b},'
            f'"result":{format_result(self.result)}}}'
        )


class ErrorResponse(BaseModel):
    """Error payload returned with HTTP 400."""

    error: str = Field(..., description="Human-readable error message")

    def to_json(self) -> str:
        return self.model_dump_json()


class HealthStatus(BaseModel):
    """Fixed health check payload."""

    model_config = ConfigDict(frozen=True)

    status: Literal["UP"] = "UP"
    application: str = APPLICATION_NAME
    version: str = APPLICATION_VERSION

    def to_json(self) -> str:
        return self.model_dump_json()
