"""
Decoding Module

Turns parsed JSON into caller-specified types. A type is decodable when it
exposes a ``from_dict`` classmethod; ``List[T]`` of decodable types and the
plain JSON containers are supported as well.
"""

from typing import Any, List, Optional, get_args, get_origin

from .errors import DecodeError


_JSON_TYPES = (dict, list, str, int, float, bool)


def decode(data: Any, response_type: Any, url: Optional[str] = None) -> Any:
    """
    Decode ``data`` into ``response_type``.

    Args:
        data: Parsed JSON body.
        response_type: Target type (decodable class, List[...] or JSON type).
        url: Source URL, attached to the error on failure.

    Returns:
        The fully decoded value.

    Raises:
        DecodeError: If any part of ``data`` does not match the target type.
    """
    try:
        return _decode(data, response_type)
    except Exception as e:
        raise DecodeError(
            f"Could not decode {_type_name(response_type)}: {e!r}",
            url=url
        ) from e


def _decode(data: Any, response_type: Any) -> Any:
    if response_type is Any:
        return data

    if get_origin(response_type) in (list, List):
        args = get_args(response_type)
        item_type = args[0] if args else Any
        if not isinstance(data, list):
            raise TypeError(f"expected a JSON array, got {type(data).__name__}")
        return [_decode(item, item_type) for item in data]

    if response_type in _JSON_TYPES:
        if not isinstance(data, response_type):
            raise TypeError(
                f"expected {response_type.__name__}, got {type(data).__name__}"
            )
        return data

    from_dict = getattr(response_type, "from_dict", None)
    if from_dict is None:
        raise TypeError(f"{_type_name(response_type)} is not decodable")
    if not isinstance(data, dict):
        raise TypeError(f"expected a JSON object, got {type(data).__name__}")
    return from_dict(data)


def _type_name(response_type: Any) -> str:
    return getattr(response_type, "__name__", None) or repr(response_type)
