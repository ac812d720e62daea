"""
Controlador de entrypoints - Catálogo e invocación de operaciones

Traduce los errores del gateway a status HTTP:
- NotFoundError → 404
- ValidationError → 422
- UpstreamError → 502
- HandlerError → 500
"""

from typing import Any, Optional

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from app.core.dependencies import Registry
from app.core.exceptions import (
    HandlerError,
    NotFoundError,
    UpstreamError,
    ValidationError,
)


router = APIRouter(prefix="/entrypoints", tags=["entrypoints"])


class EntrypointInfo(BaseModel):
    """Metadata pública de un entrypoint."""
    key: str
    description: str
    input_schema: dict
    price: int


class InvokeRequest(BaseModel):
    """Body de la invocación."""
    input: Optional[dict[str, Any]] = None


class InvokeResponse(BaseModel):
    """Output del handler, tal cual."""
    output: Any


@router.get("", response_model=list[EntrypointInfo])
async def list_entrypoints(registry: Registry):
    """
    Listar el catálogo de entrypoints con su precio.

    No ejecuta ningún handler.
    """
    return registry.catalog()


@router.post("/{key}/invoke", response_model=InvokeResponse)
async def invoke_entrypoint(key: str, body: InvokeRequest, registry: Registry):
    """Invocar un entrypoint por su key."""
    try:
        output = await registry.dispatch(key, body.input)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        raise HTTPException(
            status_code=422,
            detail=e.errors
        )
    except UpstreamError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
    except HandlerError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

    # Los outputs son modelos camelCase; se serializan por alias
    if isinstance(output, BaseModel):
        output = output.model_dump(mode="json", by_alias=True)

    return InvokeResponse(output=output)
