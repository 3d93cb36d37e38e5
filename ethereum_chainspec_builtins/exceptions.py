"""Errors raised while decoding builtin declarations."""

import json
from dataclasses import dataclass
from enum import Enum, unique
from typing import Iterable, List, Tuple

from pydantic import ValidationError
from pydantic_core import ErrorDetails

PRICING_SHAPE_ERROR = "pricing_shape"
PRICING_TAG_ERROR = "pricing_tag"

# Tags used internally to resolve the shape of a pricing value; not part of the document
PRICING_SHAPE_TAGS = ("single", "multi")

ROOT_LOCATION = "<root>"


@unique
class DecodeErrorKind(Enum):
    """Category of a single problem found while decoding a declaration."""

    MISSING_FIELD = "missing field"
    UNKNOWN_FIELD = "unknown field"
    WRONG_SHAPE = "wrong shape"
    PRICING_TAG = "pricing tag"
    INVALID_VALUE = "invalid value"

    @classmethod
    def from_error_type(cls, error_type: str) -> "DecodeErrorKind":
        """Map a pydantic error type onto a decode error kind."""
        if error_type == "missing":
            return cls.MISSING_FIELD
        if error_type == "extra_forbidden":
            return cls.UNKNOWN_FIELD
        if error_type == PRICING_TAG_ERROR:
            return cls.PRICING_TAG
        if (
            error_type == PRICING_SHAPE_ERROR
            or error_type.endswith("_type")
            or error_type.startswith("union_tag")
        ):
            return cls.WRONG_SHAPE
        return cls.INVALID_VALUE


def format_location(
    loc: Iterable[int | str], shape_tags: Tuple[str, ...] = PRICING_SHAPE_TAGS
) -> str:
    """
    Render a pydantic error location as a readable field path.

    List indices are rendered as `[i]`, and the internal pricing shape tags are
    dropped, e.g. `('pricing', 'multi', 1, 'price', 'linear', 'word')` becomes
    `pricing[1].price.linear.word`. Locations taken from the document itself
    carry no shape tags and are rendered with `shape_tags=()`.
    """
    path = ""
    for item in loc:
        if isinstance(item, int):
            path += f"[{item}]"
        elif item in shape_tags:
            continue
        elif path:
            path += f".{item}"
        else:
            path = str(item)
    return path or ROOT_LOCATION


@dataclass(frozen=True)
class DecodeIssue:
    """A single problem found in a builtin declaration."""

    kind: DecodeErrorKind
    location: str
    message: str

    @classmethod
    def from_error_details(cls, error: ErrorDetails) -> "DecodeIssue":
        """Create an issue from a pydantic error entry."""
        return cls(
            kind=DecodeErrorKind.from_error_type(error["type"]),
            location=format_location(error["loc"]),
            message=error["msg"],
        )

    def __str__(self) -> str:
        """Print the issue as `location: message (kind)`."""
        return f"{self.location}: {self.message} ({self.kind.value})"


class DecodeError(ValueError):
    """
    A builtin declaration could not be decoded.

    Raised for any structural or value problem in the input, all of which are
    listed in `issues`.
    """

    issues: List[DecodeIssue]

    def __init__(self, issues: List[DecodeIssue]):
        """Initialize the exception with the issues found."""
        super().__init__(issues)
        self.issues = issues

    @classmethod
    def from_validation_error(cls, error: ValidationError) -> "DecodeError":
        """Create a decode error from a pydantic validation error."""
        issues = [
            DecodeIssue.from_error_details(details)
            for details in error.errors(include_url=False)
        ]
        return cls(issues)

    @classmethod
    def from_json_error(cls, error: json.JSONDecodeError) -> "DecodeError":
        """Create a decode error for a document that is not valid json."""
        issue = DecodeIssue(
            kind=DecodeErrorKind.WRONG_SHAPE,
            location=ROOT_LOCATION,
            message=f"Invalid JSON: {error.msg} at line {error.lineno} column {error.colno}",
        )
        return cls([issue])

    @classmethod
    def from_unicode_error(cls, error: UnicodeDecodeError) -> "DecodeError":
        """Create a decode error for a document that is not UTF-8 encoded."""
        issue = DecodeIssue(
            kind=DecodeErrorKind.WRONG_SHAPE,
            location=ROOT_LOCATION,
            message=f"Invalid UTF-8: {error.reason} at byte {error.start}",
        )
        return cls([issue])

    @property
    def kinds(self) -> List[DecodeErrorKind]:
        """Return the kinds of all the issues."""
        return [issue.kind for issue in self.issues]

    def __str__(self) -> str:
        """Print all the issues, one per line."""
        count = len(self.issues)
        header = f"{count} issue{'s' if count != 1 else ''} decoding builtin declaration"
        return "\n".join([header] + [f"  {issue}" for issue in self.issues])
