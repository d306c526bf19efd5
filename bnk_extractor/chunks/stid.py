# bnk_extractor/chunks/stid.py
import logging
from .base import BaseChunk

logger = logging.getLogger(__name__)

class StidChunk(BaseChunk):
    """STID (String Table) chunk parser.
    
    Maps bank ids to names. Acknowledged but not decoded.
    """
    
    SIGNATURE = b'STID'
    
    def parse(self, state) -> None:
        logger.debug(f"Skipping STID chunk ({self.header.length} bytes)")
