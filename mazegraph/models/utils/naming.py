"""Keep artifact filenames consistent across pipeline stages."""

from __future__ import annotations

STAGE_PREFIXES: dict[str, str] = {
    "classified": "classified_",
    "graph": "graph_",
    "traversal": "traversal_",
}


def strip_prefix(value: str) -> str:
    """Remove and return ``value`` without any known stage prefix."""

    for prefix in STAGE_PREFIXES.values():
        if value.startswith(prefix) and len(value) > len(prefix):
            return value[len(prefix) :]
    return value


def apply_stage_prefix(stage: str, base: str) -> str:
    """Return ``base`` prefixed for ``stage`` (ensuring no duplicate prefixes)."""

    try:
        prefix = STAGE_PREFIXES[stage.strip().lower()]
    except KeyError as exc:
        raise KeyError(f"Unknown stage '{stage}'") from exc
    return prefix + strip_prefix(base)


__all__ = ["STAGE_PREFIXES", "apply_stage_prefix", "strip_prefix"]
