"""
Pricing variants of builtin declarations.

Each variant is written in a chain specification as an object with exactly one
key, the lower-case tag of the variant, holding the variant's fields:

    {"linear": {"base": 3000, "word": 0}}
"""

from typing import Annotated, Any, ClassVar, Dict, Tuple, Type, Union

from pydantic import (
    BeforeValidator,
    Discriminator,
    SerializerFunctionWrapHandler,
    Tag,
    model_serializer,
    model_validator,
)
from pydantic_core import PydanticCustomError

from ethereum_chainspec_base_types import ChainSpecBaseModel, Uint64

from .exceptions import PRICING_TAG_ERROR


class PricingVariantModel(ChainSpecBaseModel):
    """Base class of all the pricing variants."""

    tag: ClassVar[str]
    """Key that selects the variant in a chain specification."""

    legacy_fields: ClassVar[Tuple[str, ...]] = ()
    """Optional fields kept only to decode configurations that predate pricing schedules."""

    @model_validator(mode="before")
    @classmethod
    def unwrap_tag(cls, data: Any) -> Any:
        """Accept the tagged form `{"<tag>": {...}}` in addition to the bare fields."""
        if isinstance(data, dict) and len(data) == 1 and cls.tag in data:
            return data[cls.tag]
        return data

    @model_serializer(mode="wrap")
    def serialize_tagged(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        """Serialize the variant back into its tagged form."""
        return {self.tag: handler(self)}

    @property
    def has_legacy_fields(self) -> bool:
        """Return whether any of the legacy fields of the variant was supplied."""
        return any(getattr(self, field) is not None for field in self.legacy_fields)


class Blake2F(PricingVariantModel):
    """Pricing for the Blake2 compression function: each round costs the same amount."""

    tag: ClassVar[str] = "blake2_f"

    gas_per_round: Uint64


class Linear(PricingVariantModel):
    """Linear pricing: a base price plus a price per word of input."""

    tag: ClassVar[str] = "linear"

    base: Uint64
    word: Uint64


class Modexp(PricingVariantModel):
    """Pricing for modular exponentiation."""

    tag: ClassVar[str] = "modexp"

    divisor: Uint64


class AltBn128Pairing(PricingVariantModel):
    """Pricing for the alt_bn128 pairing check: a base price plus a price per point pair."""

    tag: ClassVar[str] = "alt_bn128_pairing"
    legacy_fields: ClassVar[Tuple[str, ...]] = (
        "eip1108_transition_base",
        "eip1108_transition_pair",
    )

    base: Uint64
    pair: Uint64
    eip1108_transition_base: Uint64 | None = None
    eip1108_transition_pair: Uint64 | None = None


class AltBn128ConstOperations(PricingVariantModel):
    """Pricing for the constant alt_bn128 operations (addition and multiplication)."""

    tag: ClassVar[str] = "alt_bn128_const_operations"
    legacy_fields: ClassVar[Tuple[str, ...]] = ("eip1108_transition_price",)

    price: Uint64
    eip1108_transition_price: Uint64 | None = None


PRICING_VARIANTS: Dict[str, Type[PricingVariantModel]] = {
    variant.tag: variant
    for variant in (Blake2F, Linear, Modexp, AltBn128Pairing, AltBn128ConstOperations)
}


def check_pricing_tags(v: Any) -> Any:
    """
    Verify that a pricing object names exactly one known variant.

    Objects carrying unknown keys, no tag or several tags are rejected here, so
    that a variant is never picked just because it happens to validate first.
    """
    if not isinstance(v, dict):
        return v
    expected = ", ".join(PRICING_VARIANTS)
    unknown = [key for key in v if key not in PRICING_VARIANTS]
    if unknown:
        raise PydanticCustomError(
            PRICING_TAG_ERROR,
            "Unknown pricing key(s) {unknown}, expected exactly one of: {expected}",
            {"unknown": ", ".join(repr(key) for key in unknown), "expected": expected},
        )
    if len(v) != 1:
        raise PydanticCustomError(
            PRICING_TAG_ERROR,
            "Expected exactly one pricing tag, found {count}; valid tags: {expected}",
            {"count": len(v), "expected": expected},
        )
    return v


def pricing_variant_tag(v: Any) -> str | None:
    """Discriminator function that returns the tag of a pricing variant."""
    if isinstance(v, PricingVariantModel):
        return v.tag
    if isinstance(v, dict) and len(v) == 1:
        (key,) = v
        if key in PRICING_VARIANTS:
            return key
    return None


PricingVariant = Annotated[
    Union[
        Annotated[Blake2F, Tag(Blake2F.tag)],
        Annotated[Linear, Tag(Linear.tag)],
        Annotated[Modexp, Tag(Modexp.tag)],
        Annotated[AltBn128Pairing, Tag(AltBn128Pairing.tag)],
        Annotated[AltBn128ConstOperations, Tag(AltBn128ConstOperations.tag)],
    ],
    Discriminator(
        pricing_variant_tag,
        custom_error_type="pricing_variant_type",
        custom_error_message="Pricing variant must be an object keyed by its tag",
    ),
    BeforeValidator(check_pricing_tags),
]
"""A single pricing variant, selected by its tag."""
