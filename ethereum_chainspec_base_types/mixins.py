"""
This module provides various mixins for Pydantic models.
"""

from typing import Any, Literal

from pydantic import BaseModel


class ModelCustomizationsMixin:
    """
    A mixin that customizes the behavior of pydantic models. Any pydantic
    configuration override that must apply to all models
    should be placed here.

    This mixin is applied to both `ChainSpecBaseModel` and `ChainSpecRootModel`.
    """

    def serialize(
        self,
        mode: Literal["json", "python"],
        by_alias: bool,
        exclude_none: bool = True,
    ) -> Any:
        """
        Serializes the model to the specified format with the given parameters.

        :param mode: The mode of serialization.
              If mode is 'json', the output will only contain JSON serializable types.
              If mode is 'python', the output may contain non-JSON-serializable Python objects.
        :param by_alias: Whether to use aliases for field names.
        :param exclude_none: Whether to exclude fields with None values, default is True.
        :return: The serialized representation of the model.
        """
        return self.model_dump(  # type: ignore[attr-defined]
            mode=mode, by_alias=by_alias, exclude_none=exclude_none
        )

    def __repr_args__(self):
        """
        Generate a list of attribute-value pairs for the object representation.

        Only fields with non-None values are included, so that the legacy
        fields of a declaration only show up when they were supplied.
        Numbers with a custom string form (such as heights) are shown as strings.
        """
        repr_attrs = []
        for a in type(self).model_fields:  # type: ignore[attr-defined]
            v = getattr(self, a)
            match v:
                case None:
                    continue
                case list() | tuple() | dict() | BaseModel() | bool():
                    repr_attrs.append((a, v))
                case int() if type(v) is not int:
                    repr_attrs.append((a, str(v)))
                case _:
                    repr_attrs.append((a, v))
        return repr_attrs
