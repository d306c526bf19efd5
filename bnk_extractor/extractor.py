# bnk_extractor/extractor.py
"""Payload extraction from the DATA chunk."""
from dataclasses import dataclass, field
from typing import BinaryIO, List, Tuple
import logging
from pathlib import Path

from tqdm import tqdm

from .chunks.base import ChunkParsingError, MalformedError
from .chunks.didx.entry import IndexEntry
from .parser.reader import BinaryReader, maybe_swap32
from .parser.state import BankSession

logger = logging.getLogger(__name__)

PAYLOAD_EXTENSION = '.wem'

@dataclass
class ExtractionResult:
    """Outcome of one extraction pass."""
    written: List[Path] = field(default_factory=list)
    failed: List[Tuple[int, str]] = field(default_factory=list)
    nothing_to_extract: bool = False

    @property
    def success(self) -> bool:
        return not self.failed

def payload_path(output_dir: Path, entry_id: int, extension: str = PAYLOAD_EXTENSION) -> Path:
    """Output file for a payload id."""
    return Path(output_dir) / f"{entry_id}{extension}"

def _locate(entry: IndexEntry, session: BankSession, swap_byte_order: bool) -> Tuple[int, int]:
    """Absolute source offset and size of a payload, bounded by the DATA chunk."""
    offset = maybe_swap32(entry.offset, swap_byte_order)
    size = maybe_swap32(entry.size, swap_byte_order)

    if offset + size > session.data_size:
        raise MalformedError(
            f"Payload {entry.id} spans {offset}..{offset + size}, "
            f"outside DATA chunk of {session.data_size} bytes"
        )
    return session.data_offset + offset, size

def extract_payloads(
    stream: BinaryIO,
    session: BankSession,
    output_dir: Path,
    swap_byte_order: bool = False,
    extension: str = PAYLOAD_EXTENSION,
    show_progress: bool = False
) -> ExtractionResult:
    """Copy every indexed payload from the DATA chunk to its own file.

    Args:
        stream: The same seekable source the session was decoded from
        session: Result of the decode pass
        output_dir: Existing directory receiving ``<id><extension>`` files
        swap_byte_order: Invert byte order of entry offsets and sizes
        extension: Output file extension
        show_progress: Display a progress bar while writing

    Failures are isolated per entry: an unreadable or unwritable payload
    is logged and recorded, and extraction continues with the next one.
    """
    result = ExtractionResult()

    if not session.has_payloads:
        logger.warning("No WEM files discovered to be extracted")
        result.nothing_to_extract = True
        return result

    output_dir = Path(output_dir)
    reader = BinaryReader(stream)

    logger.info(f"Found {len(session.entries)} WEM files")
    logger.info("Start extracting...")

    entries = tqdm(session.entries, desc='Extracting', unit='file', disable=not show_progress)
    for entry in entries:
        target = payload_path(output_dir, entry.id, extension)
        try:
            position, size = _locate(entry, session, swap_byte_order)
            reader.seek(position)
            data = reader.read_bytes(size)
        except ChunkParsingError as e:
            logger.error(f"Unable to read payload {entry.id}: {e}")
            result.failed.append((entry.id, str(e)))
            continue

        try:
            with open(target, 'wb') as f:
                f.write(data)
        except OSError as e:
            logger.error(f"Unable to write file '{target}': {e}")
            result.failed.append((entry.id, str(e)))
            continue

        result.written.append(target)

    logger.info(f"Files were extracted to: {output_dir}")
    return result
