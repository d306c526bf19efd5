"""
Tests for payload extraction
"""

import struct

import pytest

from bnk_extractor.extractor import extract_payloads, payload_path
from bnk_extractor.parser import BankFileParser

from conftest import create_test_chunk, create_bank_header, create_index, create_bank

def decode_and_extract(bank_path, output_dir, swap=False):
    with open(bank_path, 'rb') as f:
        session = BankFileParser(swap_byte_order=swap).parse(f)
        return session, extract_payloads(f, session, output_dir, swap_byte_order=swap)

@pytest.fixture
def output_dir(tmp_path):
    path = tmp_path / 'out'
    path.mkdir()
    return path

PAYLOAD = bytes(range(16))

class TestExtraction:
    """Test copying payloads out of DATA"""

    def test_single_payload_round_trip(self, write_bank, output_dir):
        bank_path = write_bank(create_bank(payloads=[(7, PAYLOAD)]))
        _, result = decode_and_extract(bank_path, output_dir)

        target = output_dir / '7.wem'
        assert result.written == [target]
        assert target.read_bytes() == PAYLOAD
        assert result.success

    def test_multiple_payloads(self, write_bank, output_dir):
        payloads = [(1, b'first'), (22, b''), (333, b'\xff' * 100)]
        bank_path = write_bank(create_bank(payloads=payloads))
        _, result = decode_and_extract(bank_path, output_dir)

        assert len(result.written) == 3
        for entry_id, payload in payloads:
            assert payload_path(output_dir, entry_id).read_bytes() == payload

    def test_payload_at_offset(self, write_bank, output_dir):
        data = b'\x00' * 32 + PAYLOAD
        bank = (
            create_test_chunk(b'BKHD', create_bank_header(134, 1)) +
            create_test_chunk(b'DIDX', create_index([(7, 32, 16)])) +
            create_test_chunk(b'DATA', data)
        )
        _, result = decode_and_extract(write_bank(bank), output_dir)

        assert (output_dir / '7.wem').read_bytes() == PAYLOAD

    def test_extraction_is_idempotent(self, write_bank, output_dir):
        bank_path = write_bank(create_bank(payloads=[(1, b'abc'), (2, PAYLOAD)]))

        decode_and_extract(bank_path, output_dir)
        first = {p.name: p.read_bytes() for p in output_dir.iterdir()}
        decode_and_extract(bank_path, output_dir)
        second = {p.name: p.read_bytes() for p in output_dir.iterdir()}

        assert first == second
        assert set(first) == {'1.wem', '2.wem'}

    def test_custom_extension(self, write_bank, output_dir):
        bank_path = write_bank(create_bank(payloads=[(5, b'x')]))
        with open(bank_path, 'rb') as f:
            session = BankFileParser().parse(f)
            extract_payloads(f, session, output_dir, extension='.bin')

        assert (output_dir / '5.bin').read_bytes() == b'x'

class TestNothingToExtract:
    """Test banks without payloads"""

    def test_no_data_chunk(self, write_bank, output_dir):
        bank_path = write_bank(create_bank(payloads=[(1, b'abc')], include_data=False))
        _, result = decode_and_extract(bank_path, output_dir)

        assert result.nothing_to_extract
        assert result.written == []
        assert list(output_dir.iterdir()) == []

    def test_no_index_entries(self, write_bank, output_dir):
        bank_path = write_bank(create_bank(payloads=[]))
        _, result = decode_and_extract(bank_path, output_dir)

        assert result.nothing_to_extract
        assert result.success

class TestFailures:
    """Test per entry failure isolation"""

    def test_broken_trailing_hierarchy_still_extracts(self, write_bank, output_dir):
        hirc = struct.pack('<I', 2) + struct.pack('<bII', 2, 4, 9)
        bank = create_bank(payloads=[(7, PAYLOAD)]) + create_test_chunk(b'HIRC', hirc)
        session, result = decode_and_extract(write_bank(bank), output_dir)

        assert len(session.errors) == 1
        assert result.written == [output_dir / '7.wem']
        assert (output_dir / '7.wem').read_bytes() == PAYLOAD

    def test_entry_outside_data_chunk(self, write_bank, output_dir):
        bank = (
            create_test_chunk(b'DIDX', create_index([(1, 0, 4), (2, 2, 50), (3, 4, 4)])) +
            create_test_chunk(b'DATA', b'aaaabbbb')
        )
        _, result = decode_and_extract(write_bank(bank), output_dir)

        assert [p.name for p in result.written] == ['1.wem', '3.wem']
        assert [entry_id for entry_id, _ in result.failed] == [2]
        assert not (output_dir / '2.wem').exists()
        assert not result.success

    def test_unwritable_target_is_skipped(self, write_bank, output_dir):
        (output_dir / '1.wem').mkdir()
        bank_path = write_bank(create_bank(payloads=[(1, b'abc'), (2, b'def')]))
        _, result = decode_and_extract(bank_path, output_dir)

        assert [entry_id for entry_id, _ in result.failed] == [1]
        assert (output_dir / '2.wem').read_bytes() == b'def'

class TestByteOrder:
    """Test banks with inverted lengths and index fields"""

    def test_swapped_bank_with_inversion(self, write_bank, output_dir):
        bank_path = write_bank(create_bank(payloads=[(7, PAYLOAD), (8, b'tail')], swap=True))
        _, result = decode_and_extract(bank_path, output_dir, swap=True)

        assert (output_dir / '7.wem').read_bytes() == PAYLOAD
        assert (output_dir / '8.wem').read_bytes() == b'tail'

    def test_swapped_bank_without_inversion(self, write_bank, output_dir):
        bank_path = write_bank(create_bank(payloads=[(7, PAYLOAD)], swap=True))
        session, result = decode_and_extract(bank_path, output_dir, swap=False)

        assert session.errors
        assert result.nothing_to_extract
        assert list(output_dir.iterdir()) == []

    def test_swapped_index_fields_without_inversion(self, write_bank, output_dir):
        # Chunk lengths stored normally, only the index fields inverted
        bank = (
            create_test_chunk(b'DIDX', create_index([(7, 0, 16)], swap=True)) +
            create_test_chunk(b'DATA', PAYLOAD)
        )
        _, result = decode_and_extract(write_bank(bank), output_dir)

        assert result.written == []
        assert result.failed[0][0] == 7
