"""
Builtin (precompiled contract) declarations of a chain specification.

A declaration names the builtin, gives its pricing and optionally the block at
which it is activated:

    {
        "name": "alt_bn128_add",
        "activate_at": "0x00",
        "eip1108_transition": "0x17d433",
        "pricing": {
            "alt_bn128_const_operations": {"price": 500, "eip1108_transition_price": 150}
        }
    }

`eip1108_transition` and the `eip1108_transition_*` variant fields predate pricing
schedules and are decoded as plain optional values, independently of any schedule
present in the same declaration.
"""

import logging
from typing import Any, List

from pydantic import StrictStr, TypeAdapter, ValidationError

from ethereum_chainspec_base_types import ChainSpecBaseModel, Uint

from .exceptions import DecodeError
from .json_loader import load_json
from .pricing import PricingVariantModel
from .schedule import MultiPricing, Pricing, SinglePricing

logger = logging.getLogger(__name__)


class Builtin(ChainSpecBaseModel):
    """Builtin declaration."""

    name: StrictStr
    pricing: Pricing
    activate_at: Uint | None = None
    """Block at which the builtin is activated; active from genesis when absent."""

    eip1108_transition: Uint | None = None
    """Legacy EIP-1108 transition block, kept for backward compatibility."""

    @property
    def is_scheduled(self) -> bool:
        """Return whether the pricing is a multi-entry schedule."""
        return isinstance(self.pricing, MultiPricing)

    @property
    def variants(self) -> List[PricingVariantModel]:
        """Return every pricing variant of the declaration, in declaration order."""
        if isinstance(self.pricing, SinglePricing):
            return [self.pricing.variant]
        return [entry.price for entry in self.pricing]

    @property
    def has_legacy_fields(self) -> bool:
        """Return whether any of the legacy EIP-1108 fields was supplied."""
        if self.eip1108_transition is not None:
            return True
        return any(variant.has_legacy_fields for variant in self.variants)


BuiltinListAdapter = TypeAdapter(List[Builtin])


def log_decoded(builtin: Builtin) -> None:
    """Log a short description of a decoded declaration."""
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Decoded builtin %s: %s pricing (%s), activate_at=%s",
            builtin.name,
            "scheduled" if builtin.is_scheduled else "single",
            ", ".join(variant.tag for variant in builtin.variants),
            builtin.activate_at,
        )


def decode_builtin(data: Any) -> Builtin:
    """
    Decode a builtin declaration from its JSON data.

    Raises `DecodeError` listing every problem found in the declaration.
    """
    try:
        builtin = Builtin.model_validate(data)
    except ValidationError as e:
        raise DecodeError.from_validation_error(e) from e
    log_decoded(builtin)
    return builtin


def decode_builtin_json(json_data: str | bytes) -> Builtin:
    """
    Decode a builtin declaration from a JSON document.

    Documents repeating a key in any object are rejected before decoding.
    """
    return decode_builtin(load_json(json_data))


def decode_builtins(data: Any) -> List[Builtin]:
    """
    Decode a list of builtin declarations.

    Either every declaration decodes or a `DecodeError` is raised; issue locations
    start with the index of the offending declaration.
    """
    try:
        builtins = BuiltinListAdapter.validate_python(data)
    except ValidationError as e:
        raise DecodeError.from_validation_error(e) from e
    for builtin in builtins:
        log_decoded(builtin)
    return builtins
