"""Fixed configuration for GPT-2 style tokenizer artifacts."""

import logging
import os
from dataclasses import dataclass
from typing import Final

from .types import TokenId

# the reference artifact uses <|endoftext|> for bos, eos, pad and unk
DEFAULT_SPECIAL_TOKEN_ID: Final[TokenId] = 50256
TOKENIZER_FILENAME: Final[str] = "tokenizer.json"

LOG_LEVEL_ENV: Final[str] = "BPETOK_LOG_LEVEL"
LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT: Final[str] = "%H:%M:%S"


@dataclass(frozen=True, slots=True)
class SpecialTokenIds:
    """Designated ids for the beginning, end, padding and unknown tokens."""

    bos: TokenId = DEFAULT_SPECIAL_TOKEN_ID
    eos: TokenId = DEFAULT_SPECIAL_TOKEN_ID
    pad: TokenId = DEFAULT_SPECIAL_TOKEN_ID
    unk: TokenId = DEFAULT_SPECIAL_TOKEN_ID


def log_level_from_env(default: int = logging.WARNING) -> int:
    """Return the log level named by ``BPETOK_LOG_LEVEL`` or ``default``."""
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else default


def configure_logging(level: int | None = None) -> None:
    """Configure root logging for command line use."""
    logging.basicConfig(
        level=log_level_from_env() if level is None else level,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
