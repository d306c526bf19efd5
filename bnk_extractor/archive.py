# bnk_extractor/archive.py
"""Carve embedded SoundBanks out of large game archives.

Banks are stored back to back behind ``CSNDBKDT`` markers and end at a run
of six ``-`` bytes. Bank names live separately behind ``CSNDBNK_`` markers
as length-prefixed strings and are matched to banks by order.

Dialogue is stored outside the banks: each ``CSNDDATA`` record carries a
name such as ``X04_Kara_Line042_ENG`` and then a RIFF stream, which is
sorted into language and name folders.
"""
from typing import Iterable, List, Optional, Tuple, Union
import logging
import mmap
import re
import struct
from pathlib import Path

from .extractor import PAYLOAD_EXTENSION

logger = logging.getLogger(__name__)

BANK_MARKER = b'CSNDBKDT'
NAME_MARKER = b'CSNDBNK_'
BANK_TERMINATOR = b'-' * 6
BANK_START = b'BKHD'

MAX_NAME_LENGTH = 1000
NAME_LOOKAHEAD = 0x20

DIALOGUE_MARKER = b'CSNDDATA'
WEM_START = b'RIFF'
# Purely numeric name segments longer than this are ids, not folders
MAX_ID_DIGITS = 10

UNKNOWN_LANGUAGE = 'UNK'
LANGUAGE_FOLDERS = {
    'ENG': 'ENGLISH',
    'MEX': 'MEXICAN',
    'BRA': 'BRAZILIAN',
    'FRE': 'FRENCH',
    'ARA': 'ARABIC',
    'RUS': 'RUSSIAN',
    'POL': 'POLISH',
    'POR': 'PORTUGUESE',
    'ITA': 'ITALIAN',
    'GER': 'GERMAN',
    'SPA': 'SPANISH',
    'JPN': 'JAPANESE',
    UNKNOWN_LANGUAGE: 'UNKNOWN',
}

def find_all(data, pattern: bytes, start: int = 0) -> List[int]:
    """Offsets of every occurrence of pattern, overlapping matches included."""
    offsets = []
    pos = data.find(pattern, start)
    while pos != -1:
        offsets.append(pos)
        pos = data.find(pattern, pos + 1)
    return offsets

def _read_length(data, pos: int) -> Optional[int]:
    if pos + 4 > len(data):
        return None
    return struct.unpack('<i', data[pos:pos + 4])[0]

def _decode_name(data, pos: int, length: int) -> str:
    return bytes(data[pos:pos + length]).decode('utf-8', 'replace').strip('\x00').strip()

def read_bank_name(data, offset: int) -> Optional[str]:
    """Read the bank name stored after a name marker.

    Walks forward one tag byte plus an i32 length at a time until a length
    in 1..1000 turns up. If another length-prefixed string follows within
    the lookahead window it wins over the first one.
    """
    pos = offset

    while pos < len(data):
        pos += 1  # tag byte
        length = _read_length(data, pos)
        if length is None:
            return None
        pos += 4

        if not 0 < length <= MAX_NAME_LENGTH:
            continue
        if pos + length + 4 > len(data):
            return None

        candidate = _decode_name(data, pos, length)
        if not candidate:
            pos += length
            continue

        lookahead = pos + length
        for _ in range(NAME_LOOKAHEAD):
            next_length = _read_length(data, lookahead)
            if next_length is None:
                break
            if 0 < next_length <= MAX_NAME_LENGTH and lookahead + 4 + next_length <= len(data):
                next_candidate = _decode_name(data, lookahead + 4, next_length)
                if next_candidate:
                    return next_candidate
            lookahead += 1

        return candidate

    return None

def slice_bank(data, offset: int) -> Optional[bytes]:
    """Bank bytes from a bank marker up to the terminator, starting at BKHD."""
    end = data.find(BANK_TERMINATOR, offset)
    if end == -1:
        end = len(data)
    if end <= offset:
        return None

    blob = bytes(data[offset:end])
    start = blob.find(BANK_START)
    if start == -1:
        return None
    return blob[start:]

def sanitize_name(name: str) -> str:
    """Strip characters that are not valid in file names."""
    cleaned = re.sub(r'[<>:"/\\|?*\x00-\x1f]', '', name).strip(' .')
    return cleaned

def carve_banks(archive_path: Union[str, Path], output_dir: Union[str, Path]) -> List[Path]:
    """Write every bank found in archive_path to output_dir as <name>.bnk.

    Returns:
        Paths of the banks written, in archive order
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []

    with open(archive_path, 'rb') as f:
        if f.seek(0, 2) == 0:
            logger.warning(f"Archive {archive_path} is empty")
            return written
        with mmap.mmap(f.fileno(), 0, access=mmap.ACCESS_READ) as mm:
            names = []
            for name_offset in find_all(mm, NAME_MARKER):
                name = read_bank_name(mm, name_offset)
                if name:
                    names.append(name)

            bank_offsets = find_all(mm, BANK_MARKER)
            logger.info(f"Found {len(bank_offsets)} bank markers and {len(names)} bank names")

            count = 0
            for offset in bank_offsets:
                bank = slice_bank(mm, offset)
                if not bank:
                    logger.debug(f"No bank data behind marker at offset {offset}")
                    continue

                name = sanitize_name(names[count]) if count < len(names) else ''
                if not name:
                    name = f"UNK_BANK_{count}"
                target = output_dir / f"{name}.bnk"

                try:
                    with open(target, 'wb') as out:
                        out.write(bank)
                except OSError as e:
                    logger.error(f"Error writing bank at offset {offset} to {target}: {e}")
                    continue

                written.append(target)
                count += 1

    logger.info(f"Carved {len(written)} banks into {output_dir}")
    return written

def clean_dialogue_name(raw: bytes) -> str:
    """Keep ASCII letters, digits and underscores, then cut at the first X.

    An X among the first four characters is a prefix letter, so the cut
    moves to the next one. Without any usable X the name is kept whole.
    """
    name = re.sub(rb'[^A-Za-z0-9_]', b'', bytes(raw)).decode('ascii')

    first_x = name.find('X')
    if first_x != -1 and first_x <= 3:
        first_x = name.find('X', first_x + 1)
    if first_x == -1:
        first_x = 0
    return name[first_x:]

def split_language(name: str) -> Tuple[Optional[str], str]:
    """Split off the language code, taken from the last underscore that is
    followed by three letters. Returns (code or None, remaining name)."""
    pos = name.rfind('_')
    while pos != -1:
        code = ''.join(c for c in name[pos + 1:pos + 4].upper() if c.isalpha())
        if len(code) == 3:
            return code, name[:pos]
        pos = name.rfind('_', 0, pos)
    return None, name

def dialogue_segments(name: str) -> List[str]:
    """Path segments of a dialogue name, long numeric ids dropped."""
    segments = [
        s for s in name.split('_')
        if s and not (s.isdigit() and len(s) > MAX_ID_DIGITS)
    ]
    return segments or ['UnknownDialogue']

def dialogue_target(output_dir: Path, language: str, name: str) -> Path:
    """<output_dir>/wem/dialogue/<LANGUAGE>/<segments...>/<last segment>.wem"""
    segments = dialogue_segments(name)
    folder = LANGUAGE_FOLDERS.get(language, LANGUAGE_FOLDERS[UNKNOWN_LANGUAGE])
    target_dir = Path(output_dir, 'wem', 'dialogue', folder, *segments[:-1])
    return target_dir / f"{segments[-1]}{PAYLOAD_EXTENSION}"

def carve_dialogue(archive_path: Union[str, Path], output_dir: Union[str, Path],
                   languages: Optional[Iterable[str]] = None) -> List[Path]:
    """Write every dialogue stream of the selected languages as a .wem file.

    Each ``CSNDDATA`` record holds a name followed by a RIFF stream that runs
    up to the six byte terminator. Records whose name carries no language
    code count as ``UNK``.

    Args:
        archive_path: Game archive to scan
        output_dir: Root directory; files land under ``wem/dialogue``
        languages: Three letter codes to keep, all known codes when None

    Returns:
        Paths of the streams written, in archive order
    """
    if languages is None:
        selected = set(LANGUAGE_FOLDERS)
    else:
        selected = {code.strip().upper() for code in languages if code.strip()}
    written: List[Path] = []

    with open(archive_path, 'rb') as f:
        if f.seek(0, 2) == 0:
            logger.warning(f"Archive {archive_path} is empty")
            return written
        with mmap.mmap(f.fileno(), 0, access=mmap.ACCESS_READ) as mm:
            offsets = find_all(mm, DIALOGUE_MARKER)
            logger.info(f"Found {len(offsets)} dialogue markers")

            for offset in offsets:
                start = offset + len(DIALOGUE_MARKER)
                stream_start = mm.find(WEM_START, start)
                if stream_start <= start:
                    continue

                language, name = split_language(clean_dialogue_name(mm[start:stream_start]))
                if language is None:
                    logger.warning(f"No language code in dialogue at offset {offset}, using {UNKNOWN_LANGUAGE}")
                    language = UNKNOWN_LANGUAGE
                if language not in selected:
                    logger.debug(f"Skipping dialogue at offset {offset} with language {language}")
                    continue

                stream_end = mm.find(BANK_TERMINATOR, stream_start)
                if stream_end == -1:
                    stream_end = len(mm)

                target = dialogue_target(Path(output_dir), language, name)
                try:
                    target.parent.mkdir(parents=True, exist_ok=True)
                    with open(target, 'wb') as out:
                        out.write(mm[stream_start:stream_end])
                except OSError as e:
                    logger.error(f"Error writing dialogue at offset {offset} to {target}: {e}")
                    continue

                logger.debug(f"Extracted dialogue WEM: {target}")
                written.append(target)

    logger.info(f"Carved {len(written)} dialogue streams into {output_dir}")
    return written
