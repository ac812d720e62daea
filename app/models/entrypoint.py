from typing import Any, Awaitable, Callable

from pydantic import BaseModel, Field


class EntrypointDescriptor(BaseModel):
    """Operación con precio expuesta por el gateway"""

    key: str
    description: str
    input_model: type[BaseModel]  # schema de validación del input
    price: int = Field(0, ge=0)  # unidades mínimas; 0 = gratis
    handler: Callable[[Any], Awaitable[Any]]

    @property
    def is_free(self) -> bool:
        return self.price == 0

    def metadata(self) -> dict:
        """Metadata pública, sin invocar el handler"""
        return {
            "key": self.key,
            "description": self.description,
            "input_schema": self.input_model.model_json_schema(),
            "price": self.price,
        }
