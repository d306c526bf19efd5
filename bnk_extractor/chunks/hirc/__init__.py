# bnk_extractor/chunks/hirc/__init__.py
"""HIRC (Hierarchy) chunk parser and object records."""
from .parser import HircChunk
from .objects import ObjectHeader, EventObject, EventActionObject
from .types import ObjectType, EventActionScope, EventActionType, EventActionParameterType

__all__ = [
    'HircChunk',
    'ObjectHeader',
    'EventObject',
    'EventActionObject',
    'ObjectType',
    'EventActionScope',
    'EventActionType',
    'EventActionParameterType',
]
