"""Values that may appear in an outgoing JSON request body.

The headless service takes bodies mixing strings, integers, booleans, lists
and nested objects, e.g.::

    {"address": "H123...", "value": 123, "create_mint": true}

``RequestValue`` is the closed set of shapes we ever send. Floats and ``null``
are not part of it; an unset optional field is left out of the body instead
of being sent as ``null``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

from headless_cli.exceptions import RequestValueError

MAX_INT = 2**32 - 1

RequestValue = Union[int, str, bool, "list[RequestValue]", "dict[str, RequestValue]"]


def to_request_value(obj: Any) -> RequestValue:
    """Convert a native value into a JSON-ready request value.

    Integers must fit an unsigned 32-bit word. Lists (and tuples) and
    string-keyed mappings are converted element by element.

    Raises ``RequestValueError`` for anything else.
    """
    # bool is a subclass of int, check it first
    if isinstance(obj, bool):
        return obj
    if isinstance(obj, int):
        if not 0 <= obj <= MAX_INT:
            raise RequestValueError(f"integer out of range: {obj}")
        return obj
    if isinstance(obj, str):
        return obj
    if isinstance(obj, (list, tuple)):
        return [to_request_value(item) for item in obj]
    if isinstance(obj, Mapping):
        converted: dict[str, RequestValue] = {}
        for key, value in obj.items():
            if not isinstance(key, str):
                raise RequestValueError(f"mapping keys must be strings, got {type(key).__name__}")
            converted[key] = to_request_value(value)
        return converted
    raise RequestValueError(f"unsupported request value type: {type(obj).__name__}")


class Payload(dict):
    """A JSON object body built field by field.

    Usage::

        body = Payload()
        body.put("address", address)
        body.put_optional("change_address", change_address)
    """

    def put(self, key: str, value: Any) -> "Payload":
        self[key] = to_request_value(value)
        return self

    def put_optional(self, key: str, value: Any | None) -> "Payload":
        """Insert *value* under *key* unless it is ``None``."""
        if value is not None:
            self.put(key, value)
        return self
