"""
Dependencies de FastAPI para inyectar los componentes del gateway
"""

from typing import Annotated

from fastapi import Depends, Request

from app.services.entrypoint_registry import EntrypointRegistry


def get_registry(request: Request) -> EntrypointRegistry:
    """Registry armado en el lifespan (o inyectado por los tests)"""
    return request.app.state.registry


# Alias de tipo para que se vea mas limpio en los endpoints
Registry = Annotated[EntrypointRegistry, Depends(get_registry)]
