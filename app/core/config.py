"""
Configuración de la app cargada desde variables de entorno (.env)

Todo lo que varía entre desarrollo/producción va aquí
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ESPN - proveedor upstream de datos de UFC
    espn_base_url: str = "https://site.api.espn.com/apis/site/v2/sports/mma/ufc"
    upstream_timeout_seconds: float = 10.0  # Nunca esperamos indefinidamente a ESPN

    # Metadata del agente (se publica en /.well-known/agent.json)
    agent_name: str = "ufc-intel"
    agent_version: str = "1.0.0"
    agent_description: str = "Live UFC/MMA fight data, event schedules, and results via ESPN API"

    # App
    app_env: str = "development"  # o "production"
    debug: bool = False
    log_level: str = "INFO"
    port: int = 3000

    # CORS - de dónde pueden venir los requests
    cors_origins: str = "http://localhost:3000"  # URLs separadas por coma

    # Pagos - si está deshabilitado, los endpoints pagos no registran transacciones
    payments_enabled: bool = True

    # Registro público (ERC-8004)
    # Railway expone el dominio público en RAILWAY_PUBLIC_DOMAIN
    railway_public_domain: str | None = None
    default_public_url: str = "https://ufc-intel-production.up.railway.app"

    class Config:
        env_file = ".env"  # Lee desde el archivo .env
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignora campos extras del .env que no estén en el modelo

    @property
    def public_base_url(self) -> str:
        """URL base pública del servicio"""
        if self.railway_public_domain:
            return f"https://{self.railway_public_domain}"
        return self.default_public_url


@lru_cache()
def get_settings() -> Settings:
    """Retorna la instancia de configuración (cacheada para no releerla)"""
    return Settings()
