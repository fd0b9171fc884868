# Copyright (c) 2026 Rectigraph
# SPDX-License-Identifier: MIT

"""
Serializers for graph documents.

Each serializer formats a GraphDocument for one consumer of the graphing
service. None of them modify the document.
"""

from rectigraph.runtime.serializers.base import SerializerFormat
from rectigraph.runtime.serializers.document import build_document, to_calc_state
from rectigraph.runtime.serializers.form import encode_thumbnail, to_data_url, to_form_data

__all__ = [
    "SerializerFormat",
    "build_document",
    "to_calc_state",
    "to_form_data",
    "to_data_url",
    "encode_thumbnail",
]
