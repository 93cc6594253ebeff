from fastapi import status

from .base import AppError


class SessaoNotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, sessao_id: int):
        self.sessao_id = sessao_id
        detail = f"Sessao with ID {sessao_id} not found."
        super().__init__(detail)
