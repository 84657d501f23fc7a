"""Identifier generation for catalog entities."""

from __future__ import annotations

import uuid


def new_id(prefix: str) -> str:
    """Return a practically unique id such as ``product_3f2b...``.

    No ordering or monotonicity is implied.
    """
    return f"{prefix}_{uuid.uuid4().hex}"
