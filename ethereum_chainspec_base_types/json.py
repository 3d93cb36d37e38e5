"""
JSON encoding for chain specification types.
"""

from typing import Any, List

from .pydantic import ChainSpecBaseModel, ChainSpecRootModel


def to_json(
    input: (
        ChainSpecBaseModel
        | ChainSpecRootModel
        | List[ChainSpecBaseModel | ChainSpecRootModel]
    ),
) -> Any:
    """
    Converts a model to its json data representation.
    """
    if isinstance(input, list):
        return [to_json(item) for item in input]
    return input.serialize(mode="json", by_alias=True)
