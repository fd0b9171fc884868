# Copyright (c) 2026 Rectigraph
# SPDX-License-Identifier: MIT

"""
Error types raised by Rectigraph.

All errors derive from ValueError so callers that already guard schema
validation with ``except ValueError`` keep working.
"""

from __future__ import annotations


class RectigraphError(ValueError):
    """Base class for all Rectigraph errors."""


class InvalidColorError(RectigraphError):
    """A color tuple is missing a channel, non-numeric, or outside 0-255."""


class InvalidIdError(RectigraphError):
    """A graph hash token is not exactly 10 characters."""


class DimensionMismatchError(RectigraphError):
    """Pixel grid rows (or pixels) have unequal lengths."""
