"""
Builtin (precompiled contract) declarations of chain specifications.
"""

from .builtin import Builtin, decode_builtin, decode_builtin_json, decode_builtins
from .exceptions import DecodeError, DecodeErrorKind, DecodeIssue
from .json_loader import load_json
from .pricing import (
    PRICING_VARIANTS,
    AltBn128ConstOperations,
    AltBn128Pairing,
    Blake2F,
    Linear,
    Modexp,
    PricingVariant,
    PricingVariantModel,
)
from .schedule import MultiPricing, Pricing, PricingAt, SinglePricing

__all__ = (
    "AltBn128ConstOperations",
    "AltBn128Pairing",
    "Blake2F",
    "Builtin",
    "DecodeError",
    "DecodeErrorKind",
    "DecodeIssue",
    "Linear",
    "Modexp",
    "MultiPricing",
    "PRICING_VARIANTS",
    "Pricing",
    "PricingAt",
    "PricingVariant",
    "PricingVariantModel",
    "SinglePricing",
    "decode_builtin",
    "decode_builtin_json",
    "decode_builtins",
    "load_json",
)
