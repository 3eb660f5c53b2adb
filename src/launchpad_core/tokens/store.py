"""
Token table access through an abstract store.

The hosted database is external; ``TokenStore`` is the seam it plugs into.
The functions here follow the platform's read paths: a failed query is
logged and turned into an empty result, never raised to the page.
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional, Sequence

from launchpad_core.common.model import MemeToken
from launchpad_core.tokens.links import normalize_intuition_link
from launchpad_core.tokens.records import merge_creator_profiles, token_from_row, token_to_row

logger = logging.getLogger(__name__)


class TokenStore(ABC):
    """Access to the cached token table and the creators' profiles."""

    @abstractmethod
    def insert_token(self, row: Dict[str, Any]) -> Optional[Mapping[str, Any]]:
        """
        Inserts a new token row.

        :return: the stored row, including its assigned id, or None if nothing was stored.
        """
        pass

    @abstractmethod
    def list_tokens(self) -> List[Mapping[str, Any]]:
        """Returns every token row, newest first."""
        pass

    @abstractmethod
    def list_profiles(self, wallet_addresses: Sequence[str]) -> List[Mapping[str, Any]]:
        """Returns the user_profiles rows for the given wallets."""
        pass

    @abstractmethod
    def find_by_intuition_link(self, link: str) -> List[Mapping[str, Any]]:
        """Returns the token rows whose intuition_link equals 'link'."""
        pass

    @abstractmethod
    def update_token(self, contract_address: str, updates: Dict[str, Any]) -> bool:
        """
        Applies a partial update to the token with 'contract_address'.

        :return: True when the store accepted the update.
        """
        pass


def fetch_all_tokens(store: TokenStore) -> List[MemeToken]:
    """
    List all tokens with their creators' profiles attached.
    A failed profile lookup still returns the tokens, without profiles.
    """
    try:
        rows = store.list_tokens()
    except Exception as e:
        logger.error("Failed to fetch tokens: %s", e)
        return []

    if not rows:
        return []

    creators = list(dict.fromkeys(row.get("creator") for row in rows if row.get("creator")))
    try:
        profiles = store.list_profiles(creators) or []
    except Exception as e:
        logger.warning("Failed to fetch creator profiles: %s", e)
        profiles = []

    return merge_creator_profiles(rows, profiles)


def create_token(store: TokenStore, token: MemeToken) -> Optional[MemeToken]:
    """
    Insert 'token' and return it as stored, or None when the insert failed.
    """
    try:
        stored = store.insert_token(token_to_row(token))
    except Exception as e:
        logger.error("Failed to create token %s: %s", token.symbol, e)
        return None

    if not stored:
        logger.error("Store returned no row for new token %s", token.symbol)
        return None
    return token_from_row(stored)


def link_exists(store: TokenStore, link: str) -> bool:
    """
    True when another token already uses this Intuition link.
    Links are compared in normalized form; unusable links never match.
    """
    normalized = normalize_intuition_link(link)
    if not normalized:
        return False

    try:
        rows = store.find_by_intuition_link(normalized)
    except Exception as e:
        logger.error("Failed to check link %s: %s", normalized, e)
        return False

    return len(rows or []) > 0
