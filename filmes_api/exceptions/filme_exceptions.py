from fastapi import status

from .base import AppError


class FilmeNotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, filme_id: int):
        self.filme_id = filme_id
        detail = f"Filme with ID {filme_id} not found."
        super().__init__(detail)
