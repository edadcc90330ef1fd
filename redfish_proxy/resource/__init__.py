"""
Resource Package - lazy, cached proxy over linked JSON documents.
"""

from .models import RawKind, ResolutionState, classify
from .proxy import Resource

__all__ = ["RawKind", "Resource", "ResolutionState", "classify"]
