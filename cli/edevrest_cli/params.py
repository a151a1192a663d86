from __future__ import annotations


def parse_params(items: list[str] | None) -> dict[str, str]:
    """Turn ``key=value`` arguments into a query mapping; a later key wins."""
    params: dict[str, str] = {}
    for item in items or []:
        key, sep, value = item.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"expected key=value, got {item!r}")
        params[key] = value
    return params
