from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel


Direction = Literal["incoming", "outgoing"]


class Transaction(BaseModel):
    """Movimiento de pago asociado a una llamada a un entrypoint"""

    timestamp: datetime
    direction: Direction
    amount: int  # unidades mínimas, int de Python (precisión arbitraria)
    entrypoint_key: str

    class Config:
        frozen = True


class PaymentSummary(BaseModel):
    """Totales agregados del ledger sobre una ventana de tiempo"""

    outgoing_total: int
    incoming_total: int
    net_total: int  # incoming - outgoing

    outgoing_count: int
    incoming_count: int

    window_ms: Optional[int] = None
