"""Base chunk parser."""
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..parser.reader import BinaryReader
    from ..parser.state import BankState


class ChunkParsingError(Exception):
    """Raised when chunk parsing fails."""
    pass

class TruncatedError(ChunkParsingError):
    """Raised when fewer bytes remain than a fixed-size read requires."""
    pass

class MalformedError(ChunkParsingError):
    """Raised when declared lengths are internally inconsistent."""
    pass

class ChunkHeader:
    """Signature and payload length of a top-level chunk."""

    SIZE = 8

    def __init__(self, signature: bytes, length: int, offset: int):
        self.signature = signature
        self.length = length
        # Offset of the first payload byte, right after the header
        self.offset = offset

    @property
    def end(self) -> int:
        return self.offset + self.length

    @property
    def name(self) -> str:
        return self.signature.decode('ascii', 'replace')

    def __repr__(self) -> str:
        return f"ChunkHeader({self.signature!r}, length={self.length}, offset={self.offset})"

class BaseChunk:
    """Base class for chunk parsers."""
    
    def __init__(self, header: ChunkHeader, reader: 'BinaryReader'):
        """Initialize chunk parser.
        
        Args:
            header: Chunk header, already byte-order corrected
            reader: Reader positioned at the first payload byte
        """
        self.header = header
        self.reader = reader
    
    def parse(self, state: 'BankState') -> None:
        """Decode chunk payload into the decode state.
        
        Parsers may stop early or read past the payload; the dispatcher
        repositions to the chunk end afterwards either way.
        
        Raises:
            TruncatedError: If the source ends mid-record
            MalformedError: If chunk data is inconsistent
        """
        raise NotImplementedError("Subclasses must implement parse()")
    
    def _validate_entry_size(self, entry_size: int) -> None:
        """Validate chunk length is a multiple of entry size.
        
        Raises:
            MalformedError: If the length leaves a partial entry
        """
        if self.header.length % entry_size != 0:
            raise MalformedError(
                f"{self.header.name} chunk length {self.header.length} "
                f"not divisible by entry size {entry_size}"
            )

    def _validate_min_size(self, expected_size: int) -> None:
        """Validate chunk length holds at least one fixed record."""
        if self.header.length < expected_size:
            raise MalformedError(
                f"{self.header.name} chunk length {self.header.length} < {expected_size}"
            )
