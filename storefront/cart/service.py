"""Registry of in-memory cart ledgers, one per visitor view."""
import secrets
import time
from typing import Callable, Optional

from storefront.logging import get_logger, sanitize_id_for_logging

from .ledger import CartLedger

logger = get_logger(__name__)

CART_TTL = 86400  # 24 hours of inactivity
MAX_CARTS = 10_000


class CartManager:
    """
    Owns every open CartLedger, keyed by cart id.

    A ledger lives from open_cart() until discard(), until it sits idle for
    longer than `ttl` seconds, or until it is the least recently used cart
    when the registry is full. Nothing is persisted, so carts do not survive a
    process restart.
    """

    def __init__(
        self,
        ttl: float = CART_TTL,
        max_carts: int = MAX_CARTS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl = ttl
        self.max_carts = max_carts
        self._clock = clock
        # Least recently used first
        self._carts: dict[str, tuple[CartLedger, float]] = {}

    def _touch(self, ledger: CartLedger) -> None:
        self._carts.pop(ledger.cart_id, None)
        self._carts[ledger.cart_id] = (ledger, self._clock())

    def _evict(self) -> None:
        """Drop idle carts, then the least recently used ones above the cap."""
        cutoff = self._clock() - self.ttl
        expired = [cart_id for cart_id, (_, seen) in self._carts.items() if seen <= cutoff]
        for cart_id in expired:
            del self._carts[cart_id]

        overflow = len(self._carts) - self.max_carts
        if overflow > 0:
            for cart_id in list(self._carts)[:overflow]:
                del self._carts[cart_id]

        if expired or overflow > 0:
            logger.debug(
                "Evicted %d idle and %d overflow carts",
                len(expired),
                max(overflow, 0),
            )

    def open_cart(self) -> CartLedger:
        """Create an empty ledger under a fresh cart id."""
        ledger = CartLedger(cart_id=secrets.token_urlsafe(16))
        self._touch(ledger)
        self._evict()
        logger.debug("Opened cart %s", sanitize_id_for_logging(ledger.cart_id))
        return ledger

    def get_cart(self, cart_id: Optional[str]) -> Optional[CartLedger]:
        """Live ledger for cart_id; reading it resets its idle timer."""
        if not cart_id:
            return None
        self._evict()
        entry = self._carts.get(cart_id)
        if entry is None:
            return None
        ledger = entry[0]
        self._touch(ledger)
        return ledger

    def get_or_open(self, cart_id: Optional[str]) -> CartLedger:
        """Return the ledger for cart_id, opening a new one if it is unknown."""
        ledger = self.get_cart(cart_id)
        if ledger is None:
            ledger = self.open_cart()
        return ledger

    def discard(self, cart_id: Optional[str]) -> bool:
        """Drop a ledger when its view goes away."""
        entry = self._carts.pop(cart_id, None) if cart_id else None
        if entry is None:
            return False
        logger.debug(
            "Discarded cart %s with %d units",
            sanitize_id_for_logging(cart_id),
            entry[0].item_count(),
        )
        return True

    def __len__(self) -> int:
        return len(self._carts)


# Singleton instance
_cart_manager: Optional[CartManager] = None


def get_cart_manager() -> CartManager:
    """Get CartManager singleton."""
    global _cart_manager
    if _cart_manager is None:
        _cart_manager = CartManager()
    return _cart_manager
