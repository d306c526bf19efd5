# bnk_extractor/parser/reader.py
"""Positioned fixed-size reads over a seekable byte source."""
from typing import BinaryIO, Tuple, Any
import os
import struct

from ..chunks.base import TruncatedError, MalformedError

def swap32(value: int) -> int:
    """Invert the byte order of a 32-bit unsigned value."""
    return struct.unpack('<I', struct.pack('>I', value & 0xFFFFFFFF))[0]

def maybe_swap32(value: int, enabled: bool) -> int:
    """Apply swap32 only when byte-order inversion is configured."""
    return swap32(value) if enabled else value

class BinaryReader:
    """Little-endian record reader over a seekable binary stream.

    Every read either returns the full requested size or raises
    TruncatedError; the only side effect is advancing the stream cursor.
    """

    BYTE_ORDER = '<'

    def __init__(self, stream: BinaryIO):
        self.stream = stream
        self._size = None

    @property
    def size(self) -> int:
        """Total length of the underlying source."""
        if self._size is None:
            current = self.stream.tell()
            self._size = self.stream.seek(0, os.SEEK_END)
            self.stream.seek(current)
        return self._size

    def tell(self) -> int:
        return self.stream.tell()

    def seek(self, offset: int) -> None:
        """Seek to an absolute offset."""
        if offset < 0:
            raise MalformedError(f"Negative seek target {offset}")
        self.stream.seek(offset)

    def skip(self, count: int) -> None:
        """Advance the cursor by count bytes without reading them."""
        if count < 0:
            raise MalformedError(f"Negative skip of {count} bytes at offset {self.tell()}")
        self.stream.seek(count, os.SEEK_CUR)

    def remaining(self) -> int:
        return max(self.size - self.tell(), 0)

    def read_bytes(self, count: int) -> bytes:
        if count < 0:
            raise MalformedError(f"Negative read of {count} bytes at offset {self.tell()}")
        offset = self.tell()
        data = self.stream.read(count)
        if len(data) < count:
            raise TruncatedError(
                f"Needed {count} bytes at offset {offset}, only {len(data)} available"
            )
        return data

    def read_struct(self, fmt: str) -> Tuple[Any, ...]:
        """Read and unpack one record described by a struct format (no byte order prefix)."""
        fmt = self.BYTE_ORDER + fmt
        return struct.unpack(fmt, self.read_bytes(struct.calcsize(fmt)))

    def read_u8(self) -> int:
        return self.read_struct('B')[0]

    def read_i8(self) -> int:
        return self.read_struct('b')[0]

    def read_u32(self) -> int:
        return self.read_struct('I')[0]

    def read_array(self, code: str, count: int) -> Tuple[int, ...]:
        """Read count consecutive values of a single struct type code."""
        if count == 0:
            return ()
        return self.read_struct(f'{count}{code}')
