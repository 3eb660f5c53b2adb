import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Dict, Optional

from launchpad_core.common.model import ChainTokenInfo
from launchpad_core.curves.single.quadratic import QuadraticBondingCurve
from launchpad_core.tokens.records import build_token_update
from launchpad_core.tokens.store import TokenStore

logger = logging.getLogger(__name__)


class ChainReader(ABC):
    """Read access to the launch contract."""

    @abstractmethod
    def get_token_info(self, contract_address: str) -> Optional[ChainTokenInfo]:
        """
        Returns the token's supply, price and completion flag, or None when the
        chain has not caught up with the last transaction yet.
        """
        pass

    @abstractmethod
    def get_balance(self, contract_address: str, holder_address: str) -> Decimal:
        """Returns the holder's token balance."""
        pass


class TokenSynchronizer:
    """
    Mirrors post-trade chain state into the token store.

    Everything here is best effort: a trade has already settled on chain, so a
    failed read or write is logged and reported as False, never raised. The
    next page load re-reads the chain anyway.
    """

    def __init__(self, curve: QuadraticBondingCurve, chain: ChainReader, store: TokenStore, read_attempts: int = 2):
        if read_attempts < 1:
            raise ValueError("read_attempts must be at least 1.")
        self.curve = curve
        self.chain = chain
        self.store = store
        self.read_attempts = read_attempts

    def _read_token_info(self, contract_address: str) -> Optional[ChainTokenInfo]:
        for attempt in range(1, self.read_attempts + 1):
            try:
                info = self.chain.get_token_info(contract_address)
            except Exception as e:
                logger.warning("Token info read %d for %s failed: %s", attempt, contract_address, e)
                continue
            if info is not None:
                return info
            logger.info("Token info for %s not ready on read %d", contract_address, attempt)
        return None

    def _write(self, contract_address: str, updates: Dict[str, Any]) -> bool:
        try:
            return self.store.update_token(contract_address, updates)
        except Exception as e:
            logger.error("Failed to update token %s: %s", contract_address, e)
            return False

    def sync_after_trade(self, contract_address: str) -> bool:
        """
        Re-read the token from chain and write price, supply, market cap and
        completion to the store.
        """
        info = self._read_token_info(contract_address)
        if info is None:
            logger.info("Token data for %s not ready yet, will update on next load", contract_address)
            return False

        updates = build_token_update(
            self.curve,
            current_price=info.current_price,
            current_supply=info.current_supply,
            is_completed=info.completed,
        )
        logger.info("Updating token %s with %s", contract_address, updates)
        return self._write(contract_address, updates)

    def track_holder(self, contract_address: str, holder_address: str) -> bool:
        """
        Mark the token as held when 'holder_address' has a positive balance.

        Without transfer event indexing the true holder count is unknown, so the
        store only learns that at least one holder exists.
        """
        try:
            balance = self.chain.get_balance(contract_address, holder_address)
        except Exception as e:
            logger.error("Failed to read balance of %s on %s: %s", holder_address, contract_address, e)
            return False

        if balance <= 0:
            logger.info("%s is not a holder of %s", holder_address, contract_address)
            return False

        return self._write(contract_address, build_token_update(self.curve, holders=1))
