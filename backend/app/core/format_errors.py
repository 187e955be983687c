"""Validation Error Formatting - collapses pydantic error lists into one description.

Invariants:
    - Pure function, no IO
    - "missing" errors read "<field> is required"
    - value errors surface the validator's own message (no "Value error, " prefix)
    - JSON decode errors read "invalid JSON: <detail>"
    - Multiple errors joined with "; " in the order pydantic reports them
"""

from typing import Any, Sequence

_LOCATION_ROOTS = ("body", "query", "path", "header", "cookie")


def field_name(loc: Sequence[Any]) -> str:
    """Dotted field path without the request-part prefix ("body", "query"...)."""
    parts = list(loc)
    if parts and parts[0] in _LOCATION_ROOTS:
        root, parts = parts[0], parts[1:]
        if not parts:
            return root
    return ".".join(str(p) for p in parts)


def describe_error(error: dict) -> str:
    """One pydantic error dict -> one human-readable phrase."""
    kind = error.get("type", "")
    ctx = error.get("ctx") or {}
    if kind == "json_invalid":
        return f"invalid JSON: {ctx.get('error', error.get('msg', ''))}"
    name = field_name(error.get("loc", ()))
    if kind == "missing":
        return f"{name} is required"
    if kind == "value_error" and ctx.get("error") is not None:
        return str(ctx["error"])
    return f"{name}: {error.get('msg', 'invalid value')}"


def describe_validation_errors(errors: Sequence[dict]) -> str:
    if not errors:
        return "invalid request"
    return "; ".join(describe_error(e) for e in errors)
