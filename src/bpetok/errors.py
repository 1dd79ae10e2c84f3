"""Custom exception hierarchy for bpetok tokenization errors."""

import regex as re


class BpeTokError(Exception):
    """Base exception for all bpetok errors."""


class TokenizationError(BpeTokError):
    """Raised when text cannot be segmented."""

    def __init__(
        self,
        message: str,
        *,
        position: int | None = None,
        input_text: str | None = None,
    ) -> None:
        extra = " "
        if position is not None:
            extra += f"(position: {position}) "
        super().__init__(message + extra)
        self.position = position
        self.input_text = input_text


class VocabularyError(BpeTokError):
    """Raised when vocabulary operations fail."""

    def __init__(
        self,
        message: str,
        *,
        vocab_size: int | None = None,
        invalid_tok: object | None = None,
    ) -> None:
        """Initialize with optional token and vocab_size that get appended to the message."""
        extra = " "
        if vocab_size is not None:
            extra += f"(vocab size: {vocab_size}) "
        if invalid_tok is not None:
            extra += f"(invalid token: {invalid_tok!r}) "
        super().__init__(message + extra)
        self.vocab_size = vocab_size
        self.invalid_tok = invalid_tok


class ModelLoadError(BpeTokError):
    """Raised when loading a tokenizer artifact fails."""

    def __init__(self, message: str, *, model_path: str | None = None) -> None:
        extra = " "
        if model_path:
            extra += f"(path: {model_path}) "
        super().__init__(message + extra)
        self.model_path = model_path


class PatternError(BpeTokError):
    """Raised when compiling and/or validating segment patterns."""

    def __init__(
        self,
        message: str,
        *,
        pattern: str | None = None,
        regex_err: re.error | None = None,
    ) -> None:
        """
        Initialize PatternError with pattern details.

        Args:
            message: Error message.
            pattern: The regex pattern that failed.
            regex_err: The underlying regex error from the regex library.
        """
        extra = " "
        if pattern:
            extra += f"(pattern: {pattern!r}) "
        if regex_err:
            extra += f"(reason: {regex_err}) "
        super().__init__(message + extra)
        self.pattern = pattern
        self.regex_err = regex_err


__all__ = [
    "BpeTokError",
    "TokenizationError",
    "VocabularyError",
    "ModelLoadError",
    "PatternError",
]
