"""bpetok: byte-level BPE tokenization for GPT-2 style artifacts."""

from importlib.metadata import PackageNotFoundError, version

from ._bpe import BPECache, BPEEngine
from .artifact import AddedToken, TokenizerArtifact, parse_artifact, read_artifact
from .byte_codec import BYTE_CODEC, ByteCodec, bytes_to_unicode
from .config import DEFAULT_SPECIAL_TOKEN_ID, SpecialTokenIds
from .errors import (
    BpeTokError,
    ModelLoadError,
    PatternError,
    TokenizationError,
    VocabularyError,
)
from .factory import from_pretrained
from .merges import MergeTable
from .pattern import DEFAULT_SEGMENT_CLASSES, PreTokenizer, SegmentClass
from .splitter import Segment, split_added_tokens
from .tokenizer import BPETokenizer
from .vocab import Vocabulary

try:
    __version__ = version("bpetok")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "BPETokenizer",
    "BPECache",
    "BPEEngine",
    "ByteCodec",
    "BYTE_CODEC",
    "bytes_to_unicode",
    "PreTokenizer",
    "SegmentClass",
    "DEFAULT_SEGMENT_CLASSES",
    "MergeTable",
    "Vocabulary",
    "Segment",
    "split_added_tokens",
    "AddedToken",
    "TokenizerArtifact",
    "parse_artifact",
    "read_artifact",
    "SpecialTokenIds",
    "DEFAULT_SPECIAL_TOKEN_ID",
    "from_pretrained",
    "BpeTokError",
    "ModelLoadError",
    "PatternError",
    "TokenizationError",
    "VocabularyError",
]
