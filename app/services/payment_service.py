"""
Procesamiento de pagos de los entrypoints

El gateway solo declara el precio de cada entrypoint. Quién cobra (y cómo)
se inyecta en el registry como un PaymentProcessor. La implementación que
viene incluida no mueve fondos: solo deja asentada la transacción en el ledger.
"""

import logging
from typing import Protocol

from app.models import EntrypointDescriptor
from app.services.analytics_service import PaymentAnalyticsTracker

logger = logging.getLogger(__name__)


class PaymentProcessor(Protocol):
    async def process(self, descriptor: EntrypointDescriptor) -> None:
        """Se llama antes del handler en cada entrypoint con precio > 0"""
        ...


class LedgerPaymentProcessor:
    """Registra un cobro entrante por cada llamada paga"""

    def __init__(self, tracker: PaymentAnalyticsTracker):
        self.tracker = tracker

    async def process(self, descriptor: EntrypointDescriptor) -> None:
        tx = self.tracker.record("incoming", descriptor.price, descriptor.key)
        logger.info("Recorded payment of %s for '%s'", tx.amount, tx.entrypoint_key)
