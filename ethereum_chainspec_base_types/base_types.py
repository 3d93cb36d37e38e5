"""Basic type primitives used to define other types."""

from typing import Annotated, Any, Type, TypeVar

from pydantic import Field, GetCoreSchemaHandler, StrictInt
from pydantic_core.core_schema import (
    PlainValidatorFunctionSchema,
    no_info_plain_validator_function,
    to_string_ser_schema,
)

from .conversions import MAX_UINT64, UintConvertible, to_uint

U = TypeVar("U", bound="Uint")


class ToStringSchema:
    """
    Type converter to add a simple pydantic schema that correctly
    parses and serializes the type.
    """

    @staticmethod
    def __get_pydantic_core_schema__(
        source_type: Any, handler: GetCoreSchemaHandler
    ) -> PlainValidatorFunctionSchema:
        """Call the class constructor without info and appends the serialization schema."""
        return no_info_plain_validator_function(
            source_type,
            serialization=to_string_ser_schema(),
        )


class Uint(int, ToStringSchema):
    """
    Unsigned 256-bit integer used for block heights in chain specifications.

    Accepts a native integer, a `0x`-prefixed hexadecimal string or a decimal
    string; `256`, `"256"` and `"0x100"` all produce the same value. Native
    integers above the 64-bit range must be written as strings.
    """

    def __new__(cls, input_number: UintConvertible | U):
        """Create a new Uint object."""
        if isinstance(input_number, Uint):
            return super(Uint, cls).__new__(cls, input_number)
        return super(Uint, cls).__new__(cls, to_uint(input_number))

    def __str__(self) -> str:
        """Return the hexadecimal representation of the number."""
        return self.hex()

    def hex(self) -> str:
        """Return the hexadecimal representation of the number."""
        return hex(self)

    @classmethod
    def or_none(cls: Type[U], input_number: U | UintConvertible | None) -> U | None:
        """Convert the input to a Uint while accepting None."""
        if input_number is None:
            return input_number
        return cls(input_number)


Uint64 = Annotated[StrictInt, Field(ge=0, le=MAX_UINT64)]
"""
Unsigned 64-bit integer used for gas prices.

Only native integers are accepted: strings, booleans and floats are rejected.
"""
