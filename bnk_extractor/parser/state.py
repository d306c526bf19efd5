# bnk_extractor/parser/state.py
"""Decode state built during the first pass and the session it freezes into."""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Optional, Tuple, Mapping

from ..chunks.bkhd.header import BankHeader
from ..chunks.didx.entry import IndexEntry
from ..chunks.hirc.objects import ObjectHeader, EventObject, EventActionObject

@dataclass
class BankState:
    """Mutable model filled in by chunk parsers during the decode pass."""
    header: Optional[BankHeader] = None
    entries: List[IndexEntry] = field(default_factory=list)
    objects: List[ObjectHeader] = field(default_factory=list)
    events: Dict[int, EventObject] = field(default_factory=dict)
    event_actions: Dict[int, EventActionObject] = field(default_factory=dict)
    data_offset: Optional[int] = None
    data_size: int = 0
    chunk_order: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def version(self) -> int:
        return self.header.version if self.header else 0

    def freeze(self) -> 'BankSession':
        return BankSession(
            header=self.header,
            entries=tuple(self.entries),
            objects=tuple(self.objects),
            events=MappingProxyType(dict(self.events)),
            event_actions=MappingProxyType(dict(self.event_actions)),
            data_offset=self.data_offset,
            data_size=self.data_size,
            chunk_order=tuple(self.chunk_order),
            errors=tuple(self.errors),
        )

@dataclass(frozen=True)
class BankSession:
    """Read-only result of the decode pass.

    Consumed by the extraction, report and database passes; none of them
    modify it.
    """
    header: Optional[BankHeader]
    entries: Tuple[IndexEntry, ...]
    objects: Tuple[ObjectHeader, ...]
    events: Mapping[int, EventObject]
    event_actions: Mapping[int, EventActionObject]
    data_offset: Optional[int]
    data_size: int
    chunk_order: Tuple[str, ...] = ()
    errors: Tuple[str, ...] = ()

    @property
    def has_payloads(self) -> bool:
        """True when both the index and the DATA chunk were observed."""
        return self.data_offset is not None and len(self.entries) > 0

    def to_dict(self) -> Dict:
        """Convert session to a JSON-serializable dictionary."""
        return {
            'header': self.header.to_dict() if self.header else None,
            'chunk_order': list(self.chunk_order),
            'data': {
                'offset': self.data_offset,
                'size': self.data_size
            },
            'entries': [entry.to_dict() for entry in self.entries],
            'objects': [self._object_to_dict(obj) for obj in self.objects],
            'errors': list(self.errors)
        }

    def _object_to_dict(self, obj: ObjectHeader) -> Dict:
        result = obj.to_dict()
        if obj.is_event and obj.id in self.events:
            result['event'] = self.events[obj.id].to_dict()
        elif obj.is_event_action and obj.id in self.event_actions:
            result['event_action'] = self.event_actions[obj.id].to_dict()
        return result
