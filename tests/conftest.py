"""Shared fixtures: small GPT-2 style tokenizer artifacts written to tmp_path."""

import json

import pytest

from bpetok import BYTE_CODEC, BPETokenizer

EOS_ID = 50256
LAUGH_ID = 50257

# merged tokens get ids 256.. in rank order
MERGES = [
    "h e",
    ["l", "l"],
    "he ll",
    ["hell", "o"],
    "Ġ w",
    "o r",
    ["Ġw", "or"],
    "Ġwor l",
    "Ġworl d",
]
MERGED_IDS = {
    "he": 256,
    "ll": 257,
    "hell": 258,
    "hello": 259,
    "Ġw": 260,
    "or": 261,
    "Ġwor": 262,
    "Ġworl": 263,
    "Ġworld": 264,
}


def build_config() -> dict:
    """Every single byte is a token (id = byte value) plus the merged tokens."""
    vocab = {BYTE_CODEC.byte_to_char(b): b for b in range(256)}
    vocab.update(MERGED_IDS)
    return {
        "version": "1.0",
        "added_tokens": [
            {"id": EOS_ID, "content": "<|endoftext|>", "special": True},
            {"id": LAUGH_ID, "content": "[laugh]", "special": False},
        ],
        "model": {"type": "BPE", "vocab": vocab, "merges": MERGES},
    }


@pytest.fixture
def write_artifact(tmp_path):
    """Return a function writing a config dict to a tokenizer.json file."""

    def write(config, name: str = "tokenizer.json"):
        path = tmp_path / name
        path.write_text(json.dumps(config, ensure_ascii=False), encoding="utf-8")
        return path

    return write


@pytest.fixture
def artifact_path(write_artifact):
    return write_artifact(build_config())


@pytest.fixture
def tokenizer(artifact_path):
    """Return a loaded BPETokenizer."""
    tok = BPETokenizer()
    assert tok.load(artifact_path)
    return tok
