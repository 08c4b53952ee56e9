"""Shared wire types.

Money, speeds, quotas and byte counters are exact ``Decimal`` values inside the
service but go over the wire as plain JSON numbers.
"""
from decimal import Decimal
from typing import Annotated, ClassVar

from pydantic import AfterValidator, BaseModel, BeforeValidator, Field, PlainSerializer, model_validator


# Largest value an INTEGER column holds on every supported backend.
MAX_INT = 2**31 - 1


def _to_decimal(value):
    # float -> Decimal through repr so 29.99 stays 29.99
    if isinstance(value, float):
        return Decimal(repr(value))
    return value


NumericValue = Annotated[
    Decimal,
    BeforeValidator(_to_decimal),
    PlainSerializer(float, return_type=float, when_used="json"),
]
CounterValue = Annotated[
    Decimal,
    BeforeValidator(_to_decimal),
    PlainSerializer(int, return_type=int, when_used="json"),
]


def _check_money(value: Decimal) -> Decimal:
    if value < 0:
        raise ValueError("must not be negative")
    _, digits, exponent = value.as_tuple()
    if exponent < -2:
        raise ValueError("at most 2 decimal places")
    if len(digits) + exponent > 8:
        raise ValueError("at most 8 digits before the decimal point")
    return value


MoneyValue = Annotated[
    Decimal,
    BeforeValidator(_to_decimal),
    AfterValidator(_check_money),
    PlainSerializer(float, return_type=float, when_used="json"),
]


def _check_secret_length(value: str) -> str:
    # bcrypt only reads the first 72 bytes
    if len(value.encode("utf-8")) > 72:
        raise ValueError("must be at most 72 bytes in UTF-8")
    return value


SecretValue = Annotated[str, Field(min_length=1), AfterValidator(_check_secret_length)]


class PartialUpdate(BaseModel):
    """Update payload where an omitted field is left untouched.

    ``changes()`` holds only the fields the caller actually sent, so an explicit
    ``null`` clears a nullable column while a missing key does nothing. Fields
    listed in ``non_nullable`` may be omitted but never sent as ``null``.
    """

    non_nullable: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def _reject_null_for_required(self):
        for name in self.non_nullable:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class SuccessResponse(BaseModel):
    success: bool = True
