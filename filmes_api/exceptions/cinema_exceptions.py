from fastapi import status

from .base import AppError


class CinemaNotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, cinema_id: int):
        self.cinema_id = cinema_id
        detail = f"Cinema with ID {cinema_id} not found."
        super().__init__(detail)
