# bnk_extractor/chunks/hirc/objects.py
"""Hierarchy object records.

Every object starts with a 9 byte header: type (i8), size (u32) and id
(u32). ``size`` counts every byte after the size field, the id included.
Event and EventAction bodies are decoded further; all other kinds are
carried as their header only.
"""
from dataclasses import dataclass
from typing import Dict, Any, Optional, Tuple
import logging

from ..base import MalformedError
from .types import (
    ObjectType, EventActionScope, EventActionType, EventActionParameterType, enum_name
)

logger = logging.getLogger(__name__)

# From this bank version on, Event objects store their action count in one byte
U8_ACTION_COUNT_VERSION = 134

@dataclass(frozen=True)
class ObjectHeader:
    """Generic header shared by every hierarchy object."""
    type: int
    size: int
    id: int

    # Bytes of the object body covered by the id field
    ID_SIZE = 4
    # type, size and id
    HEADER_SIZE = 9

    @property
    def kind(self) -> Optional[ObjectType]:
        """Recognized object kind, or None for unknown type tags."""
        try:
            return ObjectType(self.type)
        except ValueError:
            return None

    @property
    def is_event(self) -> bool:
        return self.type == ObjectType.EVENT

    @property
    def is_event_action(self) -> bool:
        return self.type == ObjectType.EVENT_ACTION

    @property
    def body_size(self) -> int:
        """Bytes remaining after the id field."""
        return self.size - self.ID_SIZE

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'type': self.type,
            'kind': enum_name(ObjectType, self.type),
            'size': self.size
        }

@dataclass(frozen=True)
class EventObject:
    """Event: an ordered list of event action ids."""
    action_count: int
    action_ids: Tuple[int, ...]

    @classmethod
    def read(cls, reader, header: ObjectHeader, version: int) -> 'EventObject':
        """Decode an Event body; the reader sits right after the id field."""
        count_size = 1 if version >= U8_ACTION_COUNT_VERSION else 4
        if count_size > header.body_size:
            raise MalformedError(f"Event {header.id} body too small for its action count")
        action_count = reader.read_u8() if count_size == 1 else reader.read_u32()

        needed = count_size + action_count * 4
        if needed > header.body_size:
            raise MalformedError(
                f"Event {header.id} lists {action_count} actions "
                f"({needed} bytes) but its body holds {header.body_size}"
            )

        return cls(action_count, reader.read_array('I', action_count))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'action_count': self.action_count,
            'action_ids': list(self.action_ids)
        }

@dataclass(frozen=True)
class EventActionObject:
    """EventAction: scope, action type, target and parameter list."""
    scope: int
    action_type: int
    game_object_id: int
    parameter_count: int
    parameter_types: Tuple[int, ...]
    parameter_values: Tuple[int, ...]

    # id, scope, action type, game object id, reserved, parameter count, reserved
    FIXED_SIZE = 13

    @classmethod
    def read(cls, reader, header: ObjectHeader) -> 'EventActionObject':
        """Decode an EventAction body; the reader sits right after the id field.
        
        Layout::
        
            i8  scope
            i8  action_type
            u32 game_object_id
            u8  reserved
            u8  parameter_count
            i8  parameter_types[parameter_count]
            i8  parameter_values[parameter_count]
            u8  reserved
            ... version dependent trailer
        """
        if header.size < cls.FIXED_SIZE:
            raise MalformedError(
                f"EventAction {header.id} size {header.size} < {cls.FIXED_SIZE}"
            )
        scope, action_type, game_object_id = reader.read_struct('bbI')
        reader.skip(1)
        parameter_count = reader.read_u8()

        trailer = header.size - cls.FIXED_SIZE - parameter_count * 2
        if trailer < 0:
            raise MalformedError(
                f"EventAction {header.id} with {parameter_count} parameters "
                f"does not fit in {header.size} bytes (trailer {trailer})"
            )

        parameter_types = reader.read_array('b', parameter_count)
        parameter_values = reader.read_array('b', parameter_count)
        reader.skip(1)
        if trailer:
            logger.debug(f"EventAction {header.id}: {trailer} trailing bytes not decoded")

        return cls(
            scope=scope,
            action_type=action_type,
            game_object_id=game_object_id,
            parameter_count=parameter_count,
            parameter_types=parameter_types,
            parameter_values=parameter_values
        )

    @property
    def parameters(self):
        """(type, value) pairs in stored order."""
        return list(zip(self.parameter_types, self.parameter_values))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'scope': self.scope,
            'scope_name': enum_name(EventActionScope, self.scope),
            'action_type': self.action_type,
            'action_type_name': enum_name(EventActionType, self.action_type),
            'game_object_id': self.game_object_id,
            'parameter_count': self.parameter_count,
            'parameters': [
                {
                    'type': param_type,
                    'type_name': enum_name(EventActionParameterType, param_type),
                    'value': value
                }
                for param_type, value in self.parameters
            ]
        }
