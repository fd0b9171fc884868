# Copyright (c) 2026 Rectigraph
# SPDX-License-Identifier: MIT

"""
Delivery runtime for Rectigraph.

Packages synthesized expressions for the graphing service:

1. Document -- GraphDocument assembly and ``calc_state`` JSON
2. Form -- save-form fields with graph hash and embedded thumbnail
3. Token -- graph hash validation and generation

HTTP transport is the caller's concern.
"""

from rectigraph.runtime.serializers import (
    SerializerFormat,
    build_document,
    encode_thumbnail,
    to_calc_state,
    to_data_url,
    to_form_data,
)
from rectigraph.runtime.token import (
    GRAPH_HASH_LENGTH,
    generate_graph_hash,
    validate_graph_hash,
)

__all__ = [
    "build_document",
    "to_calc_state",
    "to_form_data",
    "to_data_url",
    "encode_thumbnail",
    "SerializerFormat",
    "validate_graph_hash",
    "generate_graph_hash",
    "GRAPH_HASH_LENGTH",
]
