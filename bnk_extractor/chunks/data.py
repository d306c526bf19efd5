# bnk_extractor/chunks/data.py
from .base import BaseChunk

class DataChunk(BaseChunk):
    """DATA (Embedded Payloads) chunk parser.
    
    Only records where the payload block starts and how long it is.
    Nothing is read here; extraction seeks back in a second pass.
    """
    
    SIGNATURE = b'DATA'
    
    def parse(self, state) -> None:
        state.data_offset = self.reader.tell()
        state.data_size = self.header.length
