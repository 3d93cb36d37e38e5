"""
Strict parsing of JSON documents holding builtin declarations.

The `json` module keeps the last value of a repeated object key. A declaration
repeating a key is rejected instead: a second pricing tag or a second `base`
would otherwise silently replace the first one.
"""

import json
from typing import Any, Iterator, List, Tuple

from .exceptions import DecodeError, DecodeErrorKind, DecodeIssue, format_location
from .pricing import PRICING_VARIANTS


class JsonObject(dict):
    """Object of a JSON document that remembers the keys repeated in the source."""

    duplicate_keys: Tuple[str, ...] = ()


def object_pairs_hook(pairs: List[Tuple[str, Any]]) -> JsonObject:
    """Build a `JsonObject`, recording every key that appears more than once."""
    obj = JsonObject(pairs)
    if len(obj) < len(pairs):
        seen = set()
        duplicates: List[str] = []
        for key, _ in pairs:
            if key in seen and key not in duplicates:
                duplicates.append(key)
            seen.add(key)
        obj.duplicate_keys = tuple(duplicates)
    return obj


def find_duplicate_keys(data: Any, loc: Tuple[int | str, ...] = ()) -> Iterator[DecodeIssue]:
    """
    Yield an issue for every repeated key found in the parsed document.

    A repeated pricing tag is a `PRICING_TAG` issue, any other repeated key is a
    `WRONG_SHAPE` issue located at the key itself.
    """
    if isinstance(data, dict):
        for key in getattr(data, "duplicate_keys", ()):
            kind = (
                DecodeErrorKind.PRICING_TAG
                if key in PRICING_VARIANTS
                else DecodeErrorKind.WRONG_SHAPE
            )
            yield DecodeIssue(
                kind=kind,
                location=format_location(loc + (key,), shape_tags=()),
                message=f"Duplicate key {key!r}",
            )
        for key, value in data.items():
            yield from find_duplicate_keys(value, loc + (key,))
    elif isinstance(data, list):
        for index, item in enumerate(data):
            yield from find_duplicate_keys(item, loc + (index,))


def load_json(json_data: str | bytes) -> Any:
    """
    Parse a JSON document, rejecting repeated object keys.

    Raises `DecodeError` when the document is not UTF-8 text, is not valid JSON,
    or repeats a key in any of its objects.
    """
    if isinstance(json_data, bytes):
        try:
            json_data = json_data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError.from_unicode_error(e) from e
    try:
        data = json.loads(json_data, object_pairs_hook=object_pairs_hook)
    except json.JSONDecodeError as e:
        raise DecodeError.from_json_error(e) from e
    issues = list(find_duplicate_keys(data))
    if issues:
        raise DecodeError(issues)
    return data
