"""
Common definitions and types.
"""

from .base_types import Uint, Uint64
from .conversions import MAX_UINT64, MAX_UINT256, to_uint
from .json import to_json
from .pydantic import ChainSpecBaseModel, ChainSpecRootModel

__all__ = (
    "ChainSpecBaseModel",
    "ChainSpecRootModel",
    "MAX_UINT256",
    "MAX_UINT64",
    "Uint",
    "Uint64",
    "to_json",
    "to_uint",
)
