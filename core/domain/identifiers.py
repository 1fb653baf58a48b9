from __future__ import annotations

from uuid import uuid4


def generate_id(prefix: str = "") -> str:
    """Random unique id; ``prefix`` tags the record family (e.g. ``r-`` for reports)."""
    if prefix:
        return f"{prefix}{uuid4().hex[:12]}"
    return str(uuid4())


__all__ = ["generate_id"]
