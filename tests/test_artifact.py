"""Unit tests for reading tokenizer.json artifacts."""

import logging

import pytest

from bpetok import AddedToken, parse_artifact, read_artifact
from bpetok.errors import ModelLoadError


def test_parse_full_artifact():
    artifact = parse_artifact(
        {
            "added_tokens": [{"id": 5, "content": "[laugh]", "special": False}],
            "model": {"vocab": {"a": 0, "b": 1}, "merges": ["a b", ["a", "b"]]},
        }
    )
    assert artifact.vocab == {"a": 0, "b": 1}
    assert artifact.merges == ["a b", ["a", "b"]]
    assert artifact.added_tokens == [AddedToken("[laugh]", 5)]


def test_missing_sections_load_empty(caplog):
    with caplog.at_level(logging.WARNING, logger="bpetok.artifact"):
        artifact = parse_artifact({})
    assert artifact.vocab == {}
    assert artifact.merges == []
    assert artifact.added_tokens == []
    assert "no model section" in caplog.text


@pytest.mark.parametrize(
    "config",
    [
        [],
        {"model": []},
        {"model": {"vocab": []}},
        {"model": {"vocab": {"a": "0"}}},
        {"model": {"vocab": {"a": True}}},
        {"model": {"vocab": {"a": -1}}},
        {"model": {"merges": "a b"}},
        {"added_tokens": {}},
        {"added_tokens": ["[laugh]"]},
        {"added_tokens": [{"content": "[laugh]"}]},
        {"added_tokens": [{"id": 1}]},
    ],
)
def test_malformed_structure(config):
    with pytest.raises(ModelLoadError):
        parse_artifact(config)


def test_read_missing_file(tmp_path):
    with pytest.raises(ModelLoadError) as exc_info:
        read_artifact(tmp_path / "tokenizer.json")
    assert exc_info.value.model_path == str(tmp_path / "tokenizer.json")


def test_read_non_utf8(tmp_path):
    path = tmp_path / "tokenizer.json"
    path.write_bytes(b"\xff\xfe{")
    with pytest.raises(ModelLoadError):
        read_artifact(path)


def test_read_logs_timing(artifact_path, caplog):
    with caplog.at_level(logging.INFO, logger="bpetok._decorators"):
        read_artifact(artifact_path)
    assert "read_artifact completed" in caplog.text
