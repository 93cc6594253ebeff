from datetime import datetime

from filmes_api.models.filme import FilmeBase

__all__ = [
    "FilmePublic",
]


class FilmePublic(FilmeBase):
    id: int
    # Moment the representation was produced, not a stored column
    hora_da_consulta: datetime
