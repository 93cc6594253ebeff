from fastapi import status

from .base import AppError


class EnderecoNotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, endereco_id: int):
        self.endereco_id = endereco_id
        detail = f"Endereco with ID {endereco_id} not found."
        super().__init__(detail)


class EnderecoInUseError(AppError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, endereco_id: int):
        self.endereco_id = endereco_id
        detail = f"Endereco with ID {endereco_id} already belongs to a cinema."
        super().__init__(detail)
