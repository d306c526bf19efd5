# bnk_extractor/chunks/didx/parser.py
import logging
from ..base import BaseChunk
from .entry import IndexEntry

logger = logging.getLogger(__name__)

class DidxChunk(BaseChunk):
    """DIDX (Data Index) parser.
    
    Contains an array of entries giving id, offset and size for each
    payload stored in the DATA chunk. Entries are kept in on-disk order
    without deduplication; offsets and sizes stay as stored, byte-order
    correction happens at extraction time.
    """
    
    SIGNATURE = b'DIDX'
    
    def parse(self, state) -> None:
        """Parse DIDX chunk data."""
        self._validate_entry_size(IndexEntry.SIZE)
        
        count = self.header.length // IndexEntry.SIZE
        for i in range(count):
            entry_data = self.reader.read_bytes(IndexEntry.SIZE)
            state.entries.append(IndexEntry.from_bytes(entry_data, i))
        
        logger.debug(f"Read {count} index entries")
