"""
Shared builders for synthetic SoundBank files
"""

import struct
from typing import Iterable, List, Sequence, Tuple

import pytest

EVENT = 4
EVENT_ACTION = 3
SOUND = 2

def create_test_chunk(name: bytes, data: bytes, swap: bool = False) -> bytes:
    """Create a test chunk with the given name and data"""
    size_format = '>I' if swap else '<I'
    return name + struct.pack(size_format, len(data)) + data

def create_bank_header(version: int = 134, bank_id: int = 1000, padding: int = 0) -> bytes:
    """BKHD payload: version, bank id and optional unread extra bytes"""
    return struct.pack('<II', version, bank_id) + b'\x00' * padding

def create_index(entries: Iterable[Tuple[int, int, int]], swap: bool = False) -> bytes:
    """DIDX payload; only offset and size follow the swap setting"""
    field_format = '>I' if swap else '<I'
    data = b''
    for entry_id, offset, size in entries:
        data += struct.pack('<I', entry_id)
        data += struct.pack(field_format, offset) + struct.pack(field_format, size)
    return data

def create_object(obj_type: int, obj_id: int, body: bytes) -> bytes:
    """Hierarchy object: type, size (id included) and id"""
    return struct.pack('<bII', obj_type, 4 + len(body), obj_id) + body

def create_event(obj_id: int, action_ids: Sequence[int], version: int = 134,
                 padding: bytes = b'') -> bytes:
    count_format = '<B' if version >= 134 else '<I'
    body = struct.pack(count_format, len(action_ids))
    body += struct.pack(f'<{len(action_ids)}I', *action_ids) + padding
    return create_object(EVENT, obj_id, body)

def create_event_action(obj_id: int, scope: int = 3, action_type: int = 4,
                        game_object_id: int = 0x1234,
                        parameters: Sequence[Tuple[int, int]] = (),
                        trailer: bytes = b'') -> bytes:
    count = len(parameters)
    body = struct.pack('<bbI', scope, action_type, game_object_id)
    body += b'\x00' + struct.pack('<B', count)
    body += struct.pack(f'<{count}b', *[p[0] for p in parameters])
    body += struct.pack(f'<{count}b', *[p[1] for p in parameters])
    body += b'\x00' + trailer
    return create_object(EVENT_ACTION, obj_id, body)

def create_hirc(objects: List[bytes]) -> bytes:
    """HIRC payload: object count followed by the objects"""
    return struct.pack('<I', len(objects)) + b''.join(objects)

def create_bank(version: int = 134,
                bank_id: int = 1000,
                payloads: Sequence[Tuple[int, bytes]] = (),
                objects: Sequence[bytes] = (),
                swap: bool = False,
                include_data: bool = True,
                include_index: bool = True) -> bytes:
    """Build a complete bank with payloads stored back to back in DATA"""
    entries = []
    data = b''
    for entry_id, payload in payloads:
        entries.append((entry_id, len(data), len(payload)))
        data += payload

    bank = create_test_chunk(b'BKHD', create_bank_header(version, bank_id, padding=4), swap)
    if include_index:
        bank += create_test_chunk(b'DIDX', create_index(entries, swap), swap)
    if include_data:
        bank += create_test_chunk(b'DATA', data, swap)
    if objects:
        bank += create_test_chunk(b'HIRC', create_hirc(list(objects)), swap)
    return bank

@pytest.fixture
def write_bank(tmp_path):
    """Write bank bytes to a temporary .bnk file and return its path"""
    def _write(data: bytes, name: str = 'test.bnk'):
        path = tmp_path / name
        path.write_bytes(data)
        return path
    return _write
