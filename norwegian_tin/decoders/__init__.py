"""Deterministic decoders — TIN parsing, classification and org numbers."""

from norwegian_tin.decoders.org_number import validate_org_number
from norwegian_tin.decoders.registry import TestRegistry, build_registry, get_registry
from norwegian_tin.decoders.tin import classify, is_valid, parse, validate

__all__ = [
    "TestRegistry",
    "build_registry",
    "classify",
    "get_registry",
    "is_valid",
    "parse",
    "validate",
    "validate_org_number",
]
