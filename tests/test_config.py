"""Tests for configuration defaults and the log level override."""

import logging

import pytest

from bpetok import DEFAULT_SPECIAL_TOKEN_ID, SpecialTokenIds
from bpetok.config import LOG_LEVEL_ENV, log_level_from_env


def test_special_ids_default_to_endoftext():
    ids = SpecialTokenIds()
    assert ids.bos == ids.eos == ids.pad == ids.unk == DEFAULT_SPECIAL_TOKEN_ID == 50256


def test_special_ids_are_frozen():
    with pytest.raises(AttributeError):
        SpecialTokenIds().eos = 1


@pytest.mark.parametrize(
    "value, expected",
    [("", logging.WARNING), ("debug", logging.DEBUG), ("INFO", logging.INFO), ("loud", logging.WARNING)],
)
def test_log_level_from_env(monkeypatch, value, expected):
    monkeypatch.setenv(LOG_LEVEL_ENV, value)
    assert log_level_from_env() == expected
