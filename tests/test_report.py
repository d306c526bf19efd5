"""
Tests for object reports
"""

import io
import json

from bnk_extractor.parser import BankFileParser
from bnk_extractor.report import (
    format_object_report, write_object_report, write_json_report, OBJECT_REPORT_NAME
)

from conftest import create_bank, create_event, create_event_action, create_object, SOUND

def decode(bank: bytes):
    return BankFileParser().parse(io.BytesIO(bank))

def test_report_lists_objects_in_decode_order():
    objects = [
        create_event(100, [200, 201]),
        create_event_action(200, scope=3, action_type=4, game_object_id=55,
                            parameters=[(0x0E, 1), (0x10, -3)]),
        create_object(SOUND, 300, b'\x00' * 8),
        create_object(99, 400, b'')
    ]
    report = format_object_report(decode(create_bank(objects=objects)))

    assert report == (
        "Object ID: 100\n"
        "\tType: Event\n"
        "\tNumber of Actions: 2\n"
        "\tAction ID: 200\n"
        "\tAction ID: 201\n"
        "Object ID: 200\n"
        "\tType: EventAction\n"
        "\tAction Scope: 3\n"
        "\tAction Type: 4\n"
        "\tGame Object ID: 55\n"
        "\tNumber of Parameters: 2\n"
        "\t\tParameter Type: 14\n"
        "\t\tParameter: 1\n"
        "\t\tParameter Type: 16\n"
        "\t\tParameter: -3\n"
        "Object ID: 300\n"
        "\tType: 2 (SOUND_EFFECT_OR_VOICE)\n"
        "Object ID: 400\n"
        "\tType: 99\n"
    )

def test_empty_hierarchy():
    assert format_object_report(decode(create_bank())) == ""

def test_write_object_report(tmp_path):
    session = decode(create_bank(objects=[create_event(1, [2])]))
    path = write_object_report(session, tmp_path)

    assert path == tmp_path / OBJECT_REPORT_NAME
    assert path.read_text(encoding='utf-8').startswith("Object ID: 1\n\tType: Event\n")

def test_write_object_report_to_missing_directory(tmp_path):
    session = decode(create_bank(objects=[create_event(1, [2])]))
    assert write_object_report(session, tmp_path / 'missing') is None

def test_json_report(tmp_path):
    bank = create_bank(
        version=140, bank_id=9,
        payloads=[(7, b'abcd')],
        objects=[create_event(1, [2]), create_event_action(2, parameters=[(0x0F, 1)])]
    )
    path = write_json_report(decode(bank), tmp_path, source='test.bnk')

    data = json.loads(path.read_text(encoding='utf-8'))
    assert data['file_path'] == 'test.bnk'
    assert data['header'] == {'version': 140, 'bank_id': 9}
    assert data['entries'] == [{'id': 7, 'offset': 0, 'size': 4}]
    assert data['objects'][0]['kind'] == 'EVENT'
    assert data['objects'][0]['event']['action_ids'] == [2]
    assert data['objects'][1]['event_action']['parameters'][0]['type_name'] == 'PLAY'
