"""
Controlador de documentos well-known

- /.well-known/agent.json: tarjeta del agente con el catálogo y precios
- /.well-known/erc8004.json: documento de registro ERC-8004

La URL base sale de RAILWAY_PUBLIC_DOMAIN; si no está, se usa el host por defecto.
"""

from fastapi import APIRouter

from app.core.config import get_settings
from app.core.dependencies import Registry


router = APIRouter(prefix="/.well-known", tags=["well-known"])


@router.get("/agent.json")
async def agent_card(registry: Registry):
    """Tarjeta del agente (A2A)."""
    settings = get_settings()
    return {
        "name": settings.agent_name,
        "version": settings.agent_version,
        "description": settings.agent_description,
        "url": settings.public_base_url,
        "entrypoints": [
            {
                "key": e["key"],
                "description": e["description"],
                "price": e["price"],
            }
            for e in registry.catalog()
        ],
    }


@router.get("/erc8004.json")
async def erc8004_registration(registry: Registry):
    """Documento de registro ERC-8004."""
    settings = get_settings()
    base_url = settings.public_base_url

    catalog = registry.catalog()
    data_entrypoints = [e for e in catalog if not e["key"].startswith("analytics")]
    free_count = sum(1 for e in data_entrypoints if e["price"] == 0)
    paid_count = len(data_entrypoints) - free_count

    return {
        "type": "https://eips.ethereum.org/EIPS/eip-8004#registration-v1",
        "name": settings.agent_name,
        "description": (
            "Live UFC/MMA fight data, event schedules, and results. "
            f"{free_count} free + {paid_count} paid endpoints via x402."
        ),
        "image": f"{base_url}/icon.png",
        "services": [
            {"name": "web", "endpoint": base_url},
            {"name": "A2A", "endpoint": f"{base_url}/.well-known/agent.json", "version": "0.3.0"},
        ],
        "x402Support": True,
        "active": True,
        "registrations": [],
        "supportedTrust": ["reputation"],
    }
