# Copyright (c) 2026 Rectigraph
# SPDX-License-Identifier: MIT

"""
Graph document builder and ``calc_state`` serializer.

Wraps an expression list with the viewport and metadata the graphing
service stores alongside it. The builder never modifies expressions.
"""

from __future__ import annotations

import secrets
from collections.abc import Iterable
from typing import Optional

from rectigraph.runtime.serializers.base import SerializerFormat
from rectigraph.schema import CALC_STATE_VERSION, Expression, GraphDocument, Viewport


def build_document(
    expressions: Iterable[Expression],
    *,
    viewport: Optional[Viewport] = None,
    random_seed: Optional[str] = None,
    version: int = CALC_STATE_VERSION,
) -> GraphDocument:
    """Assemble a GraphDocument.

    Args:
        expressions: Expressions in display order.
        viewport: Visible window (defaults to the service's portrait view).
        random_seed: Seed string stored with the graph. A fresh 32-character
            hex seed is generated when omitted.
        version: Saved-state format version.
    """
    if random_seed is None:
        random_seed = secrets.token_hex(16)
    elif not random_seed:
        raise ValueError("random_seed cannot be empty")

    return GraphDocument(
        random_seed=random_seed,
        viewport=viewport if viewport is not None else Viewport(),
        expressions=tuple(expressions),
        version=version,
    )


def to_calc_state(
    document: GraphDocument,
    *,
    format: SerializerFormat = SerializerFormat.JSON,
) -> str:
    """Serialize a GraphDocument as the service's ``calc_state`` JSON.

    Example::

        {"version":9,"randomSeed":"9f1c...","graph":{"viewport":{...}},
         "expressions":{"list":[{"type":"expression","id":0,...}]}}
    """
    if format == SerializerFormat.JSON_PRETTY:
        return document.to_json(indent=2)
    return document.to_json()
