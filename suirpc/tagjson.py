"""Decoding of JSON enums given as a bare string, an object keyed by variant, or an internally tagged object."""

from __future__ import annotations

import json
from typing import Any, Callable, Mapping, Optional, Union

Decoder = Optional[Callable[[Any], Any]]


class TagJsonError(ValueError):
    """Raised when JSON data does not fit the tagged-enum shape."""


def _decode(decoder: Decoder, value: Any) -> Any:
    return value if decoder is None else decoder(value)


def decode_tag_json(
    data: Union[str, bytes],
    variants: Mapping[str, Decoder],
    tag: Optional[str] = None,
    content: Optional[str] = None,
) -> dict[str, Any]:
    """Decode raw JSON into a mapping of the variants it sets.

    ``variants`` maps each variant name to a decoder applied to its JSON value
    (``None`` keeps the value as parsed). Without ``tag`` the data is either an
    object whose keys are variant names, or a string naming unit variants, which
    are set to ``None``. With ``tag`` the object's ``tag`` field names the
    variant, decoded from the whole object or from its ``content`` field.
    """
    if isinstance(data, bytes):
        data = data.decode("utf-8")
    if not data:
        raise TagJsonError("empty json data")

    if not tag:
        if data[0] == "{":
            obj = json.loads(data)
            return {
                name: _decode(variants[name], value)
                for name, value in obj.items()
                if name in variants
            }
        if data[0] == '"':
            name_text = json.loads(data)
            return {name: None for name in variants if name_text in name}
        raise TagJsonError("value not a tag json")

    try:
        obj = json.loads(data)
    except json.JSONDecodeError as exc:
        raise TagJsonError(str(exc)) from exc
    if not isinstance(obj, dict):
        raise TagJsonError("tagged json data is not an object")
    if tag not in obj:
        raise TagJsonError(f"no such tag: {tag} in json data {obj}")
    sub_type = obj[tag]
    if not isinstance(sub_type, str):
        raise TagJsonError(f"the tag [{tag}] value is not string")

    for name, decoder in variants.items():
        if sub_type not in name:
            continue
        payload: Any = obj
        if content:
            if content not in obj:
                raise TagJsonError(f"json data [{obj}] get content key [{content}] failed")
            payload = obj[content]
        return {name: _decode(decoder, payload)}
    raise TagJsonError(f"no tag[{tag}] value <{sub_type}> in struct fields")