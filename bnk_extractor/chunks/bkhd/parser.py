# bnk_extractor/chunks/bkhd/parser.py
import logging
from ..base import BaseChunk
from .header import BankHeader

logger = logging.getLogger(__name__)

class BkhdChunk(BaseChunk):
    """BKHD (Bank Header) parser.
    
    Starts with the bank version and bank id. The rest of the chunk is
    left to the dispatcher's reseek.
    """
    
    SIGNATURE = b'BKHD'
    
    def parse(self, state) -> None:
        """Parse BKHD chunk data."""
        self._validate_min_size(BankHeader.SIZE)
        version, bank_id = self.reader.read_struct('2I')
        state.header = BankHeader(version, bank_id)

        logger.info(f"Wwise Bank Version: {version}")
        logger.info(f"Bank ID: {bank_id}")
