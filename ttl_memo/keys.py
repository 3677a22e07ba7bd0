"""Cache key derivation."""

from typing import Any

from pydantic_core import to_json


def _normalize(value: Any) -> Any:
    """Replace sets inside containers with lists in a stable order."""
    if isinstance(value, (set, frozenset)):
        items = [_normalize(item) for item in value]
        # Sort by encoded form so mixed element types still order consistently
        return sorted(items, key=to_json)
    if isinstance(value, (list, tuple)):
        return [_normalize(item) for item in value]
    if isinstance(value, dict):
        return {key: _normalize(item) for key, item in value.items()}
    return value


def default_key(args: tuple, kwargs: dict[str, Any] | None = None) -> str:
    """Serialize call arguments into a deterministic cache key.

    Positional-only calls encode as the compact JSON list of arguments, e.g.
    ``("a", 1)`` becomes ``'["a",1]'``. Calls with keyword arguments encode as
    an object, ``f(1, b=2)`` becomes ``'{"args":[1],"kwargs":{"b":2}}'`` with
    keywords sorted by name, so they never match a positional-only key.
    Sets and frozensets are written as sorted lists, so equal sets give equal
    keys.

    Args:
        args: Positional arguments of the call
        kwargs: Keyword arguments of the call

    Returns:
        JSON string usable as a cache key

    Raises:
        PydanticSerializationError: If an argument cannot be serialized
    """
    if kwargs:
        payload: Any = {
            "args": _normalize(args),
            "kwargs": _normalize(dict(sorted(kwargs.items()))),
        }
    else:
        payload = _normalize(args)
    return to_json(payload).decode()
