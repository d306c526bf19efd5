# bnk_extractor/chunks/hirc/parser.py
import logging
from ..base import BaseChunk, MalformedError
from .objects import ObjectHeader, EventObject, EventActionObject

logger = logging.getLogger(__name__)

class HircChunk(BaseChunk):
    """HIRC (Hierarchy) parser.
    
    An object count followed by that many variable-sized objects. Event and
    EventAction objects are decoded into the session maps; every object,
    known or not, is listed by its header and then skipped by its declared
    size from the recorded body start.
    """
    
    SIGNATURE = b'HIRC'
    HEADER_FORMAT = 'bI'  # type, size; the id is counted inside size
    
    def parse(self, state) -> None:
        """Parse HIRC chunk data."""
        self._validate_min_size(4)
        object_count = self.reader.read_u32()
        logger.debug(f"HIRC holds {object_count} objects")
        
        for i in range(object_count):
            if self.reader.tell() + ObjectHeader.HEADER_SIZE > self.header.end:
                raise MalformedError(
                    f"HIRC lists {object_count} objects but the chunk ends after {i}"
                )
            obj_type, obj_size = self.reader.read_struct(self.HEADER_FORMAT)
            body_start = self.reader.tell()
            body_end = body_start + obj_size
            
            if obj_size < ObjectHeader.ID_SIZE:
                raise MalformedError(
                    f"HIRC object {i} at offset {body_start} has size {obj_size}"
                )
            if body_end > self.header.end:
                raise MalformedError(
                    f"HIRC object {i} at offset {body_start} runs past chunk end "
                    f"({body_end} > {self.header.end})"
                )
            
            obj = ObjectHeader(obj_type, obj_size, self.reader.read_u32())
            
            try:
                self._parse_object_body(obj, state)
            except MalformedError as e:
                logger.warning(f"Skipping body of object {obj.id}: {e}")
                state.errors.append(str(e))
            
            self.reader.seek(body_end)
            state.objects.append(obj)
    
    def _parse_object_body(self, obj: ObjectHeader, state) -> None:
        """Decode kinds with a known layout; last record per id wins."""
        if obj.is_event:
            state.events[obj.id] = EventObject.read(self.reader, obj, state.version)
        elif obj.is_event_action:
            state.event_actions[obj.id] = EventActionObject.read(self.reader, obj)
