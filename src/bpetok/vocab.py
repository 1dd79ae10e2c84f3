"""Bidirectional token <-> id store with added tokens tracked separately."""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from .errors import VocabularyError
from .types import TokenId

log = logging.getLogger(__name__)


class Vocabulary:
    """
    Token string -> id and id -> token string mappings.

    Both directions are plain dicts updated together by :meth:`add`. Each
    direction keeps its last writer, so an added token that reuses an id
    replaces the id's token string while the old string still maps to the id.
    """

    def __init__(self) -> None:
        self._token_to_id: dict[str, TokenId] = {}
        self._id_to_token: dict[TokenId, str] = {}
        # literal strings matched before any byte remapping
        self._added: dict[str, TokenId] = {}

    def add(self, token: str, tok_id: TokenId) -> None:
        """
        Map ``token`` to ``tok_id`` in both directions.

        :raises VocabularyError: If the id is not a non-negative integer.
        """
        if isinstance(tok_id, bool) or not isinstance(tok_id, int) or tok_id < 0:
            raise VocabularyError(
                "token id must be a non-negative integer", invalid_tok=tok_id
            )
        prev = self._id_to_token.get(tok_id)
        if prev is not None and prev != token:
            log.debug(f"id {tok_id} remapped from {prev!r} to {token!r}")
        self._token_to_id[token] = tok_id
        self._id_to_token[tok_id] = token

    def add_special(self, token: str, tok_id: TokenId) -> None:
        """Register an added token and map it like any other token."""
        self.add(token, tok_id)
        self._added[token] = tok_id

    def id_of(self, token: str) -> TokenId | None:
        return self._token_to_id.get(token)

    def token_of(self, tok_id: TokenId) -> str | None:
        return self._id_to_token.get(tok_id)

    @property
    def added_tokens(self) -> Mapping[str, TokenId]:
        """Read-only view of the added tokens."""
        return MappingProxyType(self._added)

    def is_added(self, token: str) -> bool:
        return token in self._added

    def __len__(self) -> int:
        return len(self._token_to_id)

    def __contains__(self, token: object) -> bool:
        return token in self._token_to_id


__all__ = ["Vocabulary"]
