from __future__ import annotations

from .corpus import generate_malformed_sources, generate_sources

__all__ = ["generate_malformed_sources", "generate_sources"]
