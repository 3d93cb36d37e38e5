"""Local pytest configuration used on multiple framework tests."""

import copy
from typing import Any, Dict

import pytest

BUILTIN_DECLARATIONS: Dict[str, Dict[str, Any]] = {
    "ecrecover": {
        "name": "ecrecover",
        "pricing": {"linear": {"base": 3000, "word": 0}},
    },
    "ecrecover_scheduled": {
        "name": "ecrecover",
        "pricing": [
            {
                "activate_at": 0,
                "price": {"linear": {"base": 3000, "word": 0}},
            },
            {
                "info": "enable fake EIP at block 500",
                "activate_at": 500,
                "price": {"linear": {"base": 10, "word": 0}},
            },
        ],
    },
    "blake2_f": {
        "name": "blake2_f",
        "activate_at": "0xffffff",
        "pricing": {"blake2_f": {"gas_per_round": 123}},
    },
    "late_start": {
        "name": "late_start",
        "activate_at": 100000,
        "pricing": {"modexp": {"divisor": 5}},
    },
    "alt_bn128_add": {
        "name": "alt_bn128_add",
        "activate_at": "0x00",
        "eip1108_transition": "0x17d433",
        "pricing": {
            "alt_bn128_const_operations": {
                "price": 500,
                "eip1108_transition_price": 150,
            }
        },
    },
    "alt_bn128_pairing": {
        "name": "alt_bn128_pairing",
        "activate_at": "0x00",
        "eip1108_transition": "0x17d433",
        "pricing": {
            "alt_bn128_pairing": {
                "base": 100000,
                "pair": 80000,
                "eip1108_transition_base": 45000,
                "eip1108_transition_pair": 34000,
            }
        },
    },
    "alt_bn128_pairing_scheduled": {
        "name": "alt_bn128_pairing",
        "pricing": [
            {
                "info": "Byzantium",
                "activate_at": "0x42ae50",
                "price": {"alt_bn128_pairing": {"base": 100000, "pair": 80000}},
            },
            {
                "info": "EIP-1108 (Istanbul)",
                "activate_at": "0x8a61c8",
                "price": {"alt_bn128_pairing": {"base": 45000, "pair": 34000}},
            },
        ],
    },
}


@pytest.fixture
def builtin_declarations() -> Dict[str, Dict[str, Any]]:
    """
    Return valid builtin declarations keyed by a short description.

    A deep copy is returned so that tests can freely corrupt the declarations.
    """
    return copy.deepcopy(BUILTIN_DECLARATIONS)
