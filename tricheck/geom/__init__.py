"""Geometry helpers.

Pure functions over floats and `Point`: no Qt, no I/O. Everything here is
recomputed per call from the configuration it receives.
"""

from __future__ import annotations
