from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Modelo base de salida: atributos en snake_case, JSON en camelCase"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
