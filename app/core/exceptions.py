"""
Errores del gateway

Jerarquía común para todo lo que puede fallar al despachar un entrypoint.
El controlador HTTP traduce cada uno a su status code.
"""

from typing import Any, Optional


class GatewayError(Exception):
    """Error base del gateway"""
    pass


class ConfigurationError(GatewayError):
    """Catálogo mal armado (ej: dos entrypoints con la misma key)"""
    pass


class NotFoundError(GatewayError):
    """No existe un entrypoint con esa key"""

    def __init__(self, key: str):
        super().__init__(f"Entrypoint '{key}' not found")
        self.key = key


class ValidationError(GatewayError):
    """El input no cumple el schema del entrypoint"""

    def __init__(self, key: str, errors: list[dict[str, Any]]):
        super().__init__(f"Invalid input for entrypoint '{key}'")
        self.key = key
        self.errors = errors


class UpstreamError(GatewayError):
    """ESPN respondió con error o no se pudo llegar"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class HandlerError(GatewayError):
    """Falla inesperada dentro de un handler"""

    def __init__(self, key: str, cause: BaseException):
        super().__init__(f"Entrypoint '{key}' failed: {cause}")
        self.key = key
        self.cause = cause
