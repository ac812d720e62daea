"""
Registro de entrypoints

Guarda el catálogo de operaciones con precio, valida el input de cada
llamada y la despacha al handler correspondiente.
"""

import logging
from typing import Any, Awaitable, Callable, Optional

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.core.exceptions import (
    ConfigurationError,
    GatewayError,
    HandlerError,
    NotFoundError,
    ValidationError,
)
from app.models import EntrypointDescriptor
from app.services.payment_service import PaymentProcessor

logger = logging.getLogger(__name__)


class EntrypointRegistry:
    def __init__(self, payments: Optional[PaymentProcessor] = None):
        self.payments = payments
        self._entrypoints: dict[str, EntrypointDescriptor] = {}

    def __len__(self) -> int:
        return len(self._entrypoints)

    def __contains__(self, key: str) -> bool:
        return key in self._entrypoints

    def register(self, descriptor: EntrypointDescriptor) -> EntrypointDescriptor:
        """Agrega un entrypoint; las keys no se pueden repetir"""
        if descriptor.key in self._entrypoints:
            raise ConfigurationError(f"Entrypoint '{descriptor.key}' is already registered")
        self._entrypoints[descriptor.key] = descriptor
        logger.debug("Registered entrypoint '%s' (price=%s)", descriptor.key, descriptor.price)
        return descriptor

    def entrypoint(
        self,
        key: str,
        description: str,
        input_model: type[BaseModel],
        price: int = 0,
    ) -> Callable[[Callable[[Any], Awaitable[Any]]], Callable[[Any], Awaitable[Any]]]:
        """
        Decorador para registrar un handler

        Uso:
            @registry.entrypoint(key="search", description="...", input_model=SearchInput, price=2000)
            async def search(input: SearchInput):
                ...
        """
        def decorator(handler):
            self.register(EntrypointDescriptor(
                key=key,
                description=description,
                input_model=input_model,
                price=price,
                handler=handler,
            ))
            return handler
        return decorator

    def get(self, key: str) -> EntrypointDescriptor:
        descriptor = self._entrypoints.get(key)
        if descriptor is None:
            raise NotFoundError(key)
        return descriptor

    def catalog(self) -> list[dict]:
        """Metadata de todos los entrypoints, en orden de registro"""
        return [d.metadata() for d in self._entrypoints.values()]

    def validate(self, key: str, raw_input: Optional[dict]) -> BaseModel:
        descriptor = self.get(key)
        try:
            return descriptor.input_model.model_validate({} if raw_input is None else raw_input)
        except PydanticValidationError as e:
            raise ValidationError(key, e.errors(include_url=False)) from e

    async def dispatch(self, key: str, raw_input: Optional[dict] = None) -> Any:
        """
        Valida el input y ejecuta el handler del entrypoint

        Flujo:
        1. Buscar el entrypoint (NotFoundError si no existe)
        2. Validar el input (ValidationError, no se cobra ni se ejecuta nada)
        3. Si tiene precio y hay procesador de pagos, cobrar
        4. Ejecutar el handler y devolver su output sin tocarlo

        Los GatewayError del handler (ej: UpstreamError) se propagan tal cual;
        cualquier otra excepción se envuelve en HandlerError.
        """
        descriptor = self.get(key)
        validated = self.validate(key, raw_input)

        if self.payments is not None and not descriptor.is_free:
            await self.payments.process(descriptor)

        try:
            return await descriptor.handler(validated)
        except GatewayError:
            logger.warning("Entrypoint '%s' failed", key, exc_info=True)
            raise
        except Exception as e:
            logger.exception("Unexpected error in entrypoint '%s'", key)
            raise HandlerError(key, e) from e
