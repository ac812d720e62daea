"""
Controlador de salud - Endpoint de comprobación del servicio
"""

from fastapi import APIRouter
from pydantic import BaseModel

from app.core.dependencies import Registry


router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Respuesta del chequeo de estado."""
    status: str
    entrypoints: int


@router.get("/health", response_model=HealthResponse)
async def health_check(registry: Registry):
    """
    Endpoint de verificación de estado.

    Comprueba que la API esté en funcionamiento y cuántos entrypoints hay registrados.
    No consulta a ESPN.
    """
    return HealthResponse(
        status="ok",
        entrypoints=len(registry)
    )
