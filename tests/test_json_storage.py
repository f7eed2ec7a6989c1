"""
Loader/codec tests: JSON documents in, Records out, and back.
"""
from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

# Garante que o pacote seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from recordstore.domain.records import MalformedInputError, Record  # noqa: E402
from recordstore.repositories import json_storage  # noqa: E402


def _doc(*items) -> str:
    return json.dumps(list(items))


def test_load_preserves_order_and_count():
    source = _doc(
        {"id": "3", "name": "C", "description": "z"},
        {"id": "1", "name": "A", "description": "x"},
        {"id": "2", "name": "B", "description": "y"},
    )
    records = json_storage.load(source)
    assert [r.id for r in records] == ["3", "1", "2"]
    assert records[1] == Record(id="1", name="A", description="x")


def test_load_accepts_bytes_and_empty_array():
    assert json_storage.load(b"[]") == []
    records = json_storage.load('[{"id": "é", "name": "ação", "description": ""}]'.encode("utf-8"))
    assert records[0].name == "ação"


def test_load_ignores_unknown_keys():
    records = json_storage.load(_doc({"id": "1", "name": "A", "description": "x", "extra": 5}))
    assert records[0].to_payload() == {"id": "1", "name": "A", "description": "x"}


@pytest.mark.parametrize(
    "source",
    [
        "",
        "not json",
        '{"id": "1", "name": "A", "description": "x"}',
        '[{"id": "1", "name": "A"}]',
        '[{"id": 1, "name": "A", "description": "x"}]',
        '[{"id": "1", "name": null, "description": "x"}]',
        '["just a string"]',
        b"\x80[]",
    ],
)
def test_load_rejects_malformed_documents(source):
    with pytest.raises(MalformedInputError) as info:
        json_storage.load(source)
    assert info.value.code == "malformed_input"
    assert info.value.status_code == 400


def test_load_error_names_the_bad_element():
    source = _doc({"id": "1", "name": "A", "description": "x"}, {"id": "2"})
    with pytest.raises(MalformedInputError) as info:
        json_storage.load(source)
    assert "element 1" in info.value.message


def test_load_file_missing_is_malformed(tmp_path):
    with pytest.raises(MalformedInputError):
        json_storage.load_file(tmp_path / "nope.json")


def test_decode_record_requires_a_single_object():
    record = json_storage.decode_record(b'{"id": "9", "name": "N", "description": "d"}')
    assert record.id == "9"
    with pytest.raises(MalformedInputError):
        json_storage.decode_record(b'[{"id": "9", "name": "N", "description": "d"}]')
    with pytest.raises(MalformedInputError):
        json_storage.decode_record(b"")


def test_save_writes_canonical_layout(tmp_path):
    target = tmp_path / "out" / "records.json"
    records = [Record(id="1", name="A", description="x"), Record(id="2", name="B", description="y")]
    json_storage.save(target, records)

    raw = json.loads(target.read_text(encoding="utf-8"))
    assert raw == [
        {"id": "1", "name": "A", "description": "x"},
        {"id": "2", "name": "B", "description": "y"},
    ]
    assert json_storage.load_file(target) == records


def test_bundled_data_file_loads():
    records = json_storage.load_file(ROOT / "recordstore" / "data" / "records.json")
    assert len(records) == 3
    assert len({r.id for r in records}) == 3


def test_deeply_nested_document_is_malformed():
    depth = 200000
    with pytest.raises(MalformedInputError):
        json_storage.load(b"[" * depth + b"]" * depth)
    with pytest.raises(MalformedInputError):
        json_storage.decode_record(b"[" * depth + b"]" * depth)
