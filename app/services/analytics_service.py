"""
Ledger de pagos en memoria y consultas de analytics

El ledger es append-only y vive lo que vive el proceso (no se persiste).
Lo escribe solo el procesador de pagos; los entrypoints de analytics lo leen.
Todas las lecturas y escrituras pasan por el mismo lock, así que un resumen
o un export siempre ven un prefijo consistente del ledger.
"""

import csv
import io
import threading
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from app.models import PaymentSummary, Transaction
from app.models.transaction import Direction


CSV_HEADER = ["timestamp", "direction", "amount", "entrypoint_key"]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PaymentAnalyticsTracker:
    def __init__(self, clock: Callable[[], datetime] = _utcnow):
        self._clock = clock
        self._lock = threading.Lock()
        self._transactions: list[Transaction] = []

    def record(
        self,
        direction: Direction,
        amount: int,
        entrypoint_key: str,
        timestamp: Optional[datetime] = None,
    ) -> Transaction:
        """Agrega una transacción al final del ledger"""
        if direction not in ("incoming", "outgoing"):
            raise ValueError(f"Invalid direction: {direction}")
        if amount < 0:
            raise ValueError("Transaction amount must be non-negative")

        timestamp = timestamp or self._clock()
        # Las ventanas comparan contra un reloj UTC; sin zona se asume UTC
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)

        tx = Transaction(
            timestamp=timestamp,
            direction=direction,
            amount=amount,
            entrypoint_key=entrypoint_key,
        )
        with self._lock:
            self._transactions.append(tx)
        return tx

    def clear(self) -> None:
        with self._lock:
            self._transactions.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._transactions)

    def get_all_transactions(self, window_ms: Optional[int] = None) -> list[Transaction]:
        """
        Transacciones dentro de la ventana, de la más vieja a la más nueva

        Sin window_ms devuelve todo el ledger. No aplica ningún límite:
        eso le toca al que llama.
        """
        with self._lock:
            snapshot = list(self._transactions)

        if window_ms is None:
            return snapshot

        cutoff = self._clock() - timedelta(milliseconds=window_ms)
        return [tx for tx in snapshot if tx.timestamp >= cutoff]

    def summary(self, window_ms: Optional[int] = None) -> PaymentSummary:
        """Totales de la ventana; net = incoming - outgoing"""
        incoming_total = outgoing_total = 0
        incoming_count = outgoing_count = 0

        for tx in self.get_all_transactions(window_ms):
            if tx.direction == "incoming":
                incoming_total += tx.amount
                incoming_count += 1
            else:
                outgoing_total += tx.amount
                outgoing_count += 1

        return PaymentSummary(
            outgoing_total=outgoing_total,
            incoming_total=incoming_total,
            net_total=incoming_total - outgoing_total,
            outgoing_count=outgoing_count,
            incoming_count=incoming_count,
            window_ms=window_ms,
        )

    def export_to_csv(self, window_ms: Optional[int] = None) -> str:
        """
        Exporta la ventana como CSV

        Siempre incluye el header, aunque el ledger esté vacío.
        Los montos se escriben como enteros en texto (sin perder precisión).
        """
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for tx in self.get_all_transactions(window_ms):
            writer.writerow([
                tx.timestamp.isoformat(),
                tx.direction,
                str(tx.amount),
                tx.entrypoint_key,
            ])
        return buffer.getvalue()
