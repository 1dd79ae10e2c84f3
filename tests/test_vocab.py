"""Unit tests for the vocabulary store."""

import pytest

from bpetok import Vocabulary
from bpetok.errors import VocabularyError


def test_bidirectional_lookup():
    vocab = Vocabulary()
    vocab.add("hello", 7)
    assert vocab.id_of("hello") == 7
    assert vocab.token_of(7) == "hello"
    assert vocab.id_of("missing") is None
    assert vocab.token_of(8) is None
    assert "hello" in vocab
    assert len(vocab) == 1


def test_added_token_overwrites_id():
    """Last writer wins for the id; the old string still maps to the id."""
    vocab = Vocabulary()
    vocab.add("<eos>", 5)
    vocab.add_special("<|endoftext|>", 5)
    assert vocab.token_of(5) == "<|endoftext|>"
    assert vocab.id_of("<eos>") == 5
    assert vocab.is_added("<|endoftext|>")
    assert not vocab.is_added("<eos>")
    assert dict(vocab.added_tokens) == {"<|endoftext|>": 5}


def test_added_tokens_view_is_read_only():
    vocab = Vocabulary()
    vocab.add_special("[laugh]", 1)
    with pytest.raises(TypeError):
        vocab.added_tokens["[cry]"] = 2


@pytest.mark.parametrize("bad_id", [-1, "3", 1.5, True])
def test_invalid_ids_raise(bad_id):
    with pytest.raises(VocabularyError):
        Vocabulary().add("x", bad_id)
