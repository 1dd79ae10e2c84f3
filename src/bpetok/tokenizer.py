"""
Byte-level BPE tokenizer for GPT-2 style artifacts.
"""

import logging
import os
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from ._bpe import BPECache, BPEEngine
from .artifact import TokenizerArtifact, read_artifact
from .byte_codec import BYTE_CODEC, ByteCodec
from .config import SpecialTokenIds
from .errors import ModelLoadError
from .merges import MergeTable
from .pattern import PreTokenizer
from .splitter import split_added_tokens
from .types import TokenId
from .vocab import Vocabulary

log = logging.getLogger(__name__)


class BPETokenizer:
    """
    Encodes text to token ids and back using a vocabulary, ranked merges and
    added tokens loaded from a ``tokenizer.json`` artifact.

    Everything except the BPE cache is read-only after :meth:`load`. Each
    :meth:`encode` call works with its own cache unless the caller passes one,
    so separate calls may run concurrently.
    """

    def __init__(
        self,
        special_ids: SpecialTokenIds | None = None,
        pre_tokenizer: PreTokenizer | None = None,
        codec: ByteCodec = BYTE_CODEC,
    ) -> None:
        self.special_ids = special_ids or SpecialTokenIds()
        self.pre_tokenizer = pre_tokenizer or PreTokenizer()
        self.codec = codec
        self.vocab = Vocabulary()
        self.merges = MergeTable()
        self._engine = BPEEngine(self.merges)

    @classmethod
    def from_file(
        cls, path: str | Path, special_ids: SpecialTokenIds | None = None
    ) -> "BPETokenizer":
        """
        Create a tokenizer from an artifact file.

        :raises ModelLoadError: If the artifact cannot be read or is malformed.
        """
        tokenizer = cls(special_ids=special_ids)
        tokenizer._apply(read_artifact(path))
        return tokenizer

    def load(self, path: str | Path) -> bool:
        """
        Load vocabulary, merges and added tokens from ``path``.

        On failure the error is logged and the tokenizer is left empty: it
        still encodes and decodes, mapping everything to the unknown id.

        :returns: ``True`` if the artifact was loaded.
        """
        try:
            artifact = read_artifact(path)
        except ModelLoadError as e:
            log.error(f"failed to load tokenizer: {e}")
            self._reset()
            return False

        self._apply(artifact)
        return True

    def _apply(self, artifact: TokenizerArtifact) -> None:
        """Build state from ``artifact`` and swap it in."""
        vocab = Vocabulary()
        for token, tok_id in artifact.vocab.items():
            vocab.add(token, tok_id)
        # added tokens go last so they win over vocab entries sharing an id
        for added in artifact.added_tokens:
            vocab.add_special(added.content, added.id)
        merges = MergeTable.from_entries(artifact.merges)

        self.vocab = vocab
        self.merges = merges
        self._engine = BPEEngine(merges)

        log.info(
            f"loaded tokenizer: {len(vocab)} tokens, {len(merges)} merges, "
            f"{len(vocab.added_tokens)} added tokens"
        )

    def _reset(self) -> None:
        self.vocab = Vocabulary()
        self.merges = MergeTable()
        self._engine = BPEEngine(self.merges)

    @property
    def is_loaded(self) -> bool:
        return len(self.vocab) > 0

    def tokenize(self, text: str, cache: BPECache | None = None) -> list[str]:
        """
        Split text into vocabulary token strings.

        Added tokens are kept verbatim. Other text is pre-tokenized, each
        segment's UTF-8 bytes are remapped to printable characters and merged.

        :param text: Text to tokenize.
        :param cache: Session cache; cleared before use. A fresh one is used
            when omitted.
        """
        if cache is None:
            cache = BPECache()
        else:
            cache.clear()

        tokens: list[str] = []
        for segment in split_added_tokens(text, self.vocab.added_tokens):
            if segment.is_special:
                tokens.append(segment.text)
                continue

            for piece in self.pre_tokenizer.segment(segment.text):
                chunk = self.codec.encode_bytes(piece.encode("utf-8"))
                merged = self._engine.merge(chunk, cache)
                if merged:
                    tokens.extend(merged.split(" "))

        return tokens

    def encode(
        self,
        text: str,
        add_special_tokens: bool = True,
        cache: BPECache | None = None,
    ) -> list[TokenId]:
        """
        Encode text into a sequence of token ids.

        Token strings missing from the vocabulary map to the unknown id.

        :param text: Text to encode.
        :param add_special_tokens: Append the end-of-sequence id twice, as the
            paired generation model expects.
        :param cache: Session cache; cleared before use.
        :returns: Encoded token ids.
        """
        unk = self.special_ids.unk
        ids: list[TokenId] = []
        for token in self.tokenize(text, cache):
            tok_id = self.vocab.id_of(token)
            if tok_id is None:
                log.debug(f"token {token!r} not in vocabulary, using unknown id {unk}")
                tok_id = unk
            ids.append(tok_id)

        if add_special_tokens:
            ids.extend((self.special_ids.eos, self.special_ids.eos))

        return ids

    def decode(self, ids: Iterable[TokenId], skip_special_tokens: bool = True) -> str:
        """
        Decode token ids back into text.

        Ids without a token string are dropped. Invalid UTF-8 in the result is
        replaced with U+FFFD.

        :param ids: Token ids to decode.
        :param skip_special_tokens: Drop end-of-sequence ids.
        """
        eos = self.special_ids.eos
        parts: list[str] = []
        for tok_id in ids:
            if skip_special_tokens and tok_id == eos:
                continue
            token = self.vocab.token_of(tok_id)
            if token is None:
                log.debug(f"id {tok_id} not in vocabulary, dropping")
                continue
            parts.append(token)

        raw = self.codec.decode_chars("".join(parts))
        return raw.decode("utf-8", errors="replace")

    def encode_batch(
        self,
        texts: Sequence[str],
        add_special_tokens: bool = True,
        num_workers: int | None = None,
    ) -> list[list[TokenId]]:
        """
        Encode many texts, one text per worker task.

        Every text is encoded with its own cache.

        :param texts: Text inputs to encode.
        :param add_special_tokens: Passed to :meth:`encode`.
        :param num_workers: Thread count; defaults to the CPU count.
        :returns: Encoded token sequences in input order.
        """
        if not texts:
            return []

        if num_workers is None:
            workers = os.cpu_count() or 1
        else:
            workers = max(1, num_workers)  # "0" interpreted as 1 worker

        if workers == 1 or len(texts) == 1:
            return [self.encode(text, add_special_tokens) for text in texts]

        with ThreadPoolExecutor(max_workers=min(workers, len(texts))) as pool:
            return list(pool.map(lambda text: self.encode(text, add_special_tokens), texts))

    def decode_batch(
        self,
        batch: Iterable[Iterable[TokenId]],
        skip_special_tokens: bool = True,
    ) -> list[str]:
        """Decode multiple token sequences."""
        return [self.decode(ids, skip_special_tokens) for ids in batch]

    def vocab_size(self) -> int:
        """Return the number of token strings in the vocabulary."""
        return len(self.vocab)

    def merge_count(self) -> int:
        return len(self.merges)

    def added_token_count(self) -> int:
        return len(self.vocab.added_tokens)


__all__ = ["BPETokenizer"]
