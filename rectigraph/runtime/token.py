# Copyright (c) 2026 Rectigraph
# SPDX-License-Identifier: MIT

"""Graph hash tokens identifying a saved graph."""

from __future__ import annotations

import secrets
import string

from rectigraph.errors import InvalidIdError

GRAPH_HASH_LENGTH = 10


def validate_graph_hash(token: str) -> str:
    """Return ``token`` unchanged, or raise InvalidIdError if it is not 10 characters."""
    if not isinstance(token, str) or len(token) != GRAPH_HASH_LENGTH:
        raise InvalidIdError(
            f"Graph hash must be exactly {GRAPH_HASH_LENGTH} characters, got {token!r}"
        )
    return token


def generate_graph_hash() -> str:
    """Random lowercase alphabetic token of the required length."""
    return "".join(
        secrets.choice(string.ascii_lowercase) for _ in range(GRAPH_HASH_LENGTH)
    )
