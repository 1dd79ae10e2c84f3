"""Factory functions for creating tokenizers."""

from pathlib import Path

from .config import TOKENIZER_FILENAME, SpecialTokenIds
from .errors import ModelLoadError
from .tokenizer import BPETokenizer


def from_pretrained(
    model_path: str | Path, special_ids: SpecialTokenIds | None = None
) -> BPETokenizer:
    """
    Load a pre-trained tokenizer from disk.

    :param model_path: Path to a ``tokenizer.json`` file, or to a directory
                       containing one.
    :param special_ids: Designated special token ids; GPT-2 defaults when omitted.
    :return: Loaded tokenizer instance.
    :raises ModelLoadError: If the artifact doesn't exist or is malformed.

    .. code-block:: python

        tokenizer = from_pretrained("path/to/tokenizer.json")
        ids = tokenizer.encode("Hello world")
    """
    path = Path(model_path)
    if path.is_dir():
        path = path / TOKENIZER_FILENAME

    if not path.exists():
        raise ModelLoadError("model filepath does not exist", model_path=str(path))

    return BPETokenizer.from_file(path, special_ids=special_ids)


__all__ = ["from_pretrained"]
