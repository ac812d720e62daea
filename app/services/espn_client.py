"""
Cliente del scoreboard de ESPN UFC

Una sola lectura por llamada: sin reintentos y sin cache.
Cada llamada refleja el estado actual de ESPN en ese momento.
"""

import logging
from typing import Any, Optional

import httpx

from app.core.config import get_settings
from app.core.exceptions import UpstreamError

logger = logging.getLogger(__name__)


class EspnClient:
    """
    Wrapper de httpx para la API pública de ESPN

    Si se le pasa un httpx.AsyncClient lo usa tal cual (y no lo cierra);
    si no, crea uno propio con el timeout configurado.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.espn_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.upstream_timeout_seconds
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=self.timeout)

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def fetch_scoreboard(self, date_filter: Optional[str] = None) -> dict[str, Any]:
        """
        Descarga el scoreboard de ESPN

        Args:
            date_filter: Fecha YYYYMMDD opcional (se manda como ?dates=)

        Returns:
            JSON parseado del scoreboard

        Raises:
            UpstreamError: status no exitoso, error de red, timeout o body inválido
        """
        url = f"{self.base_url}/scoreboard"
        params = {"dates": date_filter} if date_filter else None

        logger.debug("GET %s params=%s", url, params)
        try:
            response = await self._client.get(url, params=params, timeout=self.timeout)
        except httpx.TimeoutException as e:
            logger.warning("ESPN timeout: %s", e)
            raise UpstreamError(f"ESPN API timeout: {e}") from e
        except httpx.RequestError as e:
            logger.warning("ESPN request failed: %s", e)
            raise UpstreamError(f"ESPN API request failed: {e}") from e

        if not response.is_success:
            logger.warning("ESPN API error: %s", response.status_code)
            raise UpstreamError(
                f"ESPN API error: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(
                "ESPN API returned invalid JSON",
                status_code=response.status_code,
            ) from e
