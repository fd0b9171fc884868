# Copyright (c) 2026 Rectigraph
# SPDX-License-Identifier: MIT

"""
Save-form payload.

Builds the url-encoded form fields the graphing service's save endpoint
accepts. Sending them is left to the caller's HTTP client.
"""

from __future__ import annotations

import base64
import io
from pathlib import Path
from typing import Any, Optional, Union

import numpy as np

from rectigraph.raster.grid import as_pixel_grid
from rectigraph.runtime.serializers.document import to_calc_state
from rectigraph.runtime.token import validate_graph_hash
from rectigraph.schema import GraphDocument


def to_form_data(
    document: GraphDocument,
    graph_hash: str,
    *,
    thumbnail: Optional[Union[bytes, Any]] = None,
) -> dict[str, str]:
    """Build the save-form fields for a document.

    Args:
        document: The graph to save.
        graph_hash: 10-character identifier for the saved graph.
        thumbnail: PNG bytes, or anything :func:`encode_thumbnail` accepts.
            Omitted from the form when None.

    Raises:
        InvalidIdError: ``graph_hash`` is not exactly 10 characters.
    """
    validate_graph_hash(graph_hash)

    fields: dict[str, str] = {}
    if thumbnail is not None:
        png = thumbnail if isinstance(thumbnail, bytes) else encode_thumbnail(thumbnail)
        fields["thumb_data"] = to_data_url(png)

    fields["calc_state"] = to_calc_state(document)
    fields["graph_hash"] = graph_hash
    fields["is_update"] = "false"
    fields["lang"] = "en"
    fields["my_graphs"] = "false"
    return fields


def to_data_url(png: bytes) -> str:
    """Embed PNG bytes as a base64 data URL."""
    return f"data:image/png;base64,{base64.b64encode(png).decode('ascii')}"


def encode_thumbnail(image: Any) -> bytes:
    """Encode an image as PNG bytes.

    Accepts a file path, a PIL image, or an RGBA pixel grid.
    """
    try:
        from PIL import Image
    except ImportError as e:
        raise ImportError(
            "Pillow is required for thumbnail encoding. "
            "Install with: pip install Pillow"
        ) from e

    if isinstance(image, Image.Image):
        img = image
    elif isinstance(image, (str, Path)):
        with Image.open(image) as opened:
            img = opened.convert("RGBA")
    else:
        pixels = as_pixel_grid(image)
        img = Image.fromarray(np.clip(pixels, 0, 255).astype(np.uint8))

    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()
