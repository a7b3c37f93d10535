"""
Grupo schemas
"""

from pydantic import BaseModel

__all__ = ["GrupoResponse"]

class GrupoResponse(BaseModel):
    id: int
    nombre: str
