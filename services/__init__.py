# -*- coding: utf-8 -*-
"""
Listing Publisher Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "PropertyApiClient",
    "DraftPersistence",
    "assemble_payload",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "PropertyApiClient":
        from .api_client import PropertyApiClient
        return PropertyApiClient
    elif name == "DraftPersistence":
        from .draft_persistence import DraftPersistence
        return DraftPersistence
    elif name == "assemble_payload":
        from .payload_assembler import assemble_payload
        return assemble_payload
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
