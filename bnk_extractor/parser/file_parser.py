"""SoundBank file parser."""
from typing import Dict, Optional, Type, BinaryIO, Union
import logging
from pathlib import Path

from ..chunks.base import BaseChunk, ChunkHeader, TruncatedError, MalformedError
from ..chunks.bkhd.parser import BkhdChunk
from ..chunks.didx.parser import DidxChunk
from ..chunks.data import DataChunk
from ..chunks.stid import StidChunk
from ..chunks.hirc.parser import HircChunk
from .reader import BinaryReader, maybe_swap32
from .state import BankState, BankSession

logger = logging.getLogger(__name__)

class ChunkRegistry:
    """Registry of chunk parsers mapped to chunk signatures."""

    def __init__(self):
        self._parsers: Dict[bytes, Type[BaseChunk]] = {}

    def register(self, signature: bytes, parser_class: Type[BaseChunk]) -> None:
        """Register a parser for a chunk signature."""
        if len(signature) != 4:
            raise ValueError(f"Chunk signature must be 4 bytes, got {signature!r}")
        self._parsers[signature] = parser_class

    def get_parser(self, signature: bytes) -> Optional[Type[BaseChunk]]:
        """Get parser for an exact, case-sensitive signature match."""
        return self._parsers.get(signature)

    def __contains__(self, signature: bytes) -> bool:
        return signature in self._parsers

    @classmethod
    def default(cls) -> 'ChunkRegistry':
        """Registry with every chunk parser this package implements."""
        registry = cls()
        for parser_class in (BkhdChunk, DidxChunk, StidChunk, DataChunk, HircChunk):
            registry.register(parser_class.SIGNATURE, parser_class)
        return registry

class BankFileParser:
    """Sequential chunk dispatcher for SoundBank files.

    Reads chunk headers until the source is exhausted, hands each payload
    to the registered parser and then seeks to the declared chunk end no
    matter how much the parser consumed.
    """

    def __init__(self, swap_byte_order: bool = False, registry: Optional[ChunkRegistry] = None):
        self.swap_byte_order = swap_byte_order
        self.registry = registry or ChunkRegistry.default()

    def _read_chunk_header(self, reader: BinaryReader) -> Optional[ChunkHeader]:
        """Read a chunk header, or None at end of input."""
        try:
            signature, length = reader.read_struct('4sI')
        except TruncatedError:
            if reader.remaining():
                logger.debug(f"Ignoring {reader.remaining()} trailing bytes")
            return None

        length = maybe_swap32(length, self.swap_byte_order)
        return ChunkHeader(signature, length, reader.tell())

    def parse(self, stream: BinaryIO) -> BankSession:
        """Run the decode pass over a seekable binary stream.

        Raises:
            TruncatedError: If the source ends in the middle of a record
        """
        reader = BinaryReader(stream)
        state = BankState()

        while True:
            header = self._read_chunk_header(reader)
            if header is None:
                break

            state.chunk_order.append(header.name)

            # Validate chunk size
            if header.end > reader.size:
                error_msg = (
                    f"Chunk {header.name} at offset {header.offset - ChunkHeader.SIZE} "
                    f"extends beyond file size ({header.end} > {reader.size}). "
                    "Corrupt file or wrong byte order?"
                )
                logger.error(error_msg)
                state.errors.append(error_msg)
                break

            parser_class = self.registry.get_parser(header.signature)
            if parser_class:
                try:
                    parser_class(header, reader).parse(state)
                except MalformedError as e:
                    error_msg = f"Failed to parse {header.name} chunk: {e}"
                    logger.error(error_msg)
                    state.errors.append(error_msg)
            else:
                logger.debug(f"No parser registered for chunk type: {header.signature!r}")

            # Seek to the end of the chunk
            reader.seek(header.end)

        return state.freeze()

    def parse_file(self, file_path: Union[str, Path]) -> BankSession:
        """Open a bank file and run the decode pass over it."""
        with open(file_path, 'rb') as f:
            return self.parse(f)
