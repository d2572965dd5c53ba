from pathlib import Path
import json
import pytest

from merobase.core import config
from merobase.core.errors import PersistenceCorruptError
from merobase.core.storage import (
    JsonFileStorage, MemoryStorage, decode_document, encode_document, default_storage,
)


def test_file_slot_roundtrip(tmp_path: Path):
    s = JsonFileStorage(data_dir=tmp_path / ".merobase_data_test")
    assert s.read("mero_samples") is None
    s.write("mero_samples", "[]")
    assert s.read("mero_samples") == "[]"
    assert (tmp_path / ".merobase_data_test" / "mero_samples.json").exists()


def test_memory_slot_roundtrip():
    s = MemoryStorage()
    s.write("k", "[1]")
    assert s.read("k") == "[1]"
    assert s.read("other") is None


def test_default_storage_uses_configured_dir(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(config, "DATA_DIR", tmp_path / "data")
    s = default_storage()
    assert s.data_dir == tmp_path / "data"
    assert s.data_dir.is_dir()


def test_document_encoding_is_idempotent():
    records = [{"sampleID": "A1-1", "sampleName": "Coral ü", "latitude": -8.5, "projectNumber": 1}]
    text = encode_document(records)
    assert decode_document("k", text) == records
    assert encode_document(decode_document("k", text)) == text


@pytest.mark.parametrize("text", [
    "{not json",
    json.dumps({"sampleID": "A1-1"}),
    json.dumps([1, 2]),
    json.dumps([{"sampleID": 5}]),
])
def test_corrupt_documents(text):
    with pytest.raises(PersistenceCorruptError) as exc:
        decode_document("mero_samples", text)
    assert exc.value.key == "mero_samples"
