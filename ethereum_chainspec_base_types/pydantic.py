"""Base pydantic classes used to define the models of chain specifications."""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel

from .mixins import ModelCustomizationsMixin

RootModelRootType = TypeVar("RootModelRootType")


class ChainSpecBaseModel(BaseModel, ModelCustomizationsMixin):
    """
    Base model for all objects of a chain specification.

    Models are closed and immutable: any field not declared on the model is a
    validation error, and instances cannot be modified once validated.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )


class ChainSpecRootModel(RootModel[RootModelRootType], ModelCustomizationsMixin):
    """Base root model for all objects of a chain specification."""

    model_config = ConfigDict(frozen=True)

    root: Any
