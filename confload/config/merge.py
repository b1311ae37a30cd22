"""
Configuration Merging
=====================

Recursive merge of configuration mappings. Later mappings take precedence:

- mapping + mapping: merged key by key
- list + list: concatenated, earlier items first
- anything else: replaced by the later value

``ReplaceValue`` forces a plain replacement of the earlier value and
``UNSET`` removes a key from the result.
"""

from copy import deepcopy
from typing import Any, Dict, Mapping


class ReplaceValue:
    """Wraps a value that must replace, not merge with, the earlier one."""

    __slots__ = ("value",)

    def __init__(self, value: Any):
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ReplaceValue) and other.value == self.value

    def __repr__(self) -> str:
        return f"ReplaceValue({self.value!r})"


class _UnsetValue:
    __slots__ = ()

    def __repr__(self) -> str:
        return "UNSET"

    def __reduce__(self):
        return "UNSET"


UNSET = _UnsetValue()


def _resolve(value: Any) -> Any:
    """Copy a value that has no counterpart, resolving nested markers."""
    if isinstance(value, ReplaceValue):
        return _resolve(value.value)
    if isinstance(value, Mapping):
        return {k: _resolve(v) for k, v in value.items() if v is not UNSET}
    if isinstance(value, list):
        return [_resolve(v) for v in value if v is not UNSET]
    return deepcopy(value)


def merge_into(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge *overrides* into *base* in place and return *base*.

    *base* must already be a resolved copy; *overrides* is never modified.
    """
    for key, value in overrides.items():
        if value is UNSET:
            base.pop(key, None)
            continue

        current = base.get(key)
        if isinstance(value, Mapping) and isinstance(current, dict):
            merge_into(current, value)
        elif isinstance(value, list) and isinstance(current, list):
            current.extend(_resolve(v) for v in value if v is not UNSET)
        else:
            base[key] = _resolve(value)
    return base


def merge(*mappings: Mapping[str, Any]) -> Dict[str, Any]:
    """Deep-merge *mappings* left to right into a new dict."""
    result: Dict[str, Any] = {}
    for mapping in mappings:
        if mapping:
            merge_into(result, mapping)
    return result
