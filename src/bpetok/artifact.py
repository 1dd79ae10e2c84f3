"""
Reading GPT-2 style ``tokenizer.json`` artifacts.

Only the parts the tokenizer needs are read: ``model.vocab``,
``model.merges`` and ``added_tokens``.
"""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from ._decorators import measure_time
from .errors import ModelLoadError
from .types import TokenId

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AddedToken:
    """Literal token matched in raw text before BPE."""

    content: str
    id: TokenId


@dataclass
class TokenizerArtifact:
    """Raw contents of a tokenizer artifact."""

    vocab: dict[str, TokenId] = field(default_factory=dict)
    # merge entries exactly as stored; malformed ones are dropped by MergeTable
    merges: list[object] = field(default_factory=list)
    added_tokens: list[AddedToken] = field(default_factory=list)


def _is_token_id(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def parse_artifact(config: object, *, model_path: str | None = None) -> TokenizerArtifact:
    """
    Validate decoded artifact JSON.

    Missing sections are treated as empty. Sections of the wrong shape raise.

    :param config: Decoded JSON document.
    :param model_path: Path used in error messages.
    :raises ModelLoadError: If the document structure is malformed.
    """
    if not isinstance(config, Mapping):
        raise ModelLoadError("artifact must be a JSON object", model_path=model_path)

    artifact = TokenizerArtifact()

    model = config.get("model")
    if model is None:
        log.warning("artifact has no model section")
        model = {}
    elif not isinstance(model, Mapping):
        raise ModelLoadError("model must be an object", model_path=model_path)

    vocab = model.get("vocab")
    if vocab is None:
        log.warning("artifact has no model.vocab")
    elif not isinstance(vocab, Mapping):
        raise ModelLoadError("model.vocab must be an object", model_path=model_path)
    else:
        for token, tok_id in vocab.items():
            if not _is_token_id(tok_id):
                raise ModelLoadError(
                    f"invalid id for vocab token {token!r}: {tok_id!r}",
                    model_path=model_path,
                )
            artifact.vocab[token] = tok_id

    merges = model.get("merges")
    if merges is None:
        log.warning("artifact has no model.merges")
    elif not isinstance(merges, list):
        raise ModelLoadError("model.merges must be a list", model_path=model_path)
    else:
        artifact.merges = list(merges)

    added = config.get("added_tokens")
    if added is None:
        added = []
    elif not isinstance(added, list):
        raise ModelLoadError("added_tokens must be a list", model_path=model_path)

    for idx, info in enumerate(added):
        if not isinstance(info, Mapping):
            raise ModelLoadError(
                f"added token {idx} must be an object", model_path=model_path
            )
        content = info.get("content")
        tok_id = info.get("id")
        if not isinstance(content, str) or not _is_token_id(tok_id):
            raise ModelLoadError(
                f"added token {idx} needs a string content and a non-negative id",
                model_path=model_path,
            )
        artifact.added_tokens.append(AddedToken(content, tok_id))

    return artifact


@measure_time
def read_artifact(path: str | Path) -> TokenizerArtifact:
    """
    Read and validate a ``tokenizer.json`` file.

    :raises ModelLoadError: If the file cannot be read, is not valid JSON, or
        is structurally malformed.
    """
    path = Path(path)
    log.info(f"reading tokenizer artifact from {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            config = json.load(f)
    except OSError as e:
        raise ModelLoadError(f"cannot read artifact: {e}", model_path=str(path)) from e
    # ValueError covers bad JSON, bad UTF-8, oversized ints and NUL in the path
    except (ValueError, RecursionError) as e:
        raise ModelLoadError(f"invalid artifact: {e}", model_path=str(path)) from e

    return parse_artifact(config, model_path=str(path))


__all__ = ["AddedToken", "TokenizerArtifact", "parse_artifact", "read_artifact"]
