"""
Payment processor base
----------------------

A processor executes a payment for exactly one method token. Built-in
processors simulate provider latency and then report the outcome.
"""
import asyncio
import logging
from abc import ABC, abstractmethod
from decimal import Decimal

logger = logging.getLogger(__name__)


class PaymentProcessor(ABC):
    """Executes payments for one payment method."""

    method: str = ""

    @abstractmethod
    async def process_payment(self, amount: Decimal) -> bool:
        """Attempt the payment. Returns True if it was accepted."""
        pass


class SimulatedPaymentProcessor(PaymentProcessor):
    """
    Processor that waits `latency_ms` (scaled) and then succeeds, or
    declines when constructed with fail=True.
    """

    latency_ms: int = 0

    def __init__(self, latency_scale: float = 1.0, fail: bool = False):
        self._latency_scale = latency_scale
        self._fail = fail

    async def process_payment(self, amount: Decimal) -> bool:
        delay = self.latency_ms * self._latency_scale / 1000
        if delay > 0:
            await asyncio.sleep(delay)
        approved = not self._fail
        logger.debug(f"[{self.method}] amount={amount} approved={approved} after {delay:.3f}s")
        return approved
