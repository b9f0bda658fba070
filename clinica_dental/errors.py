from __future__ import annotations


class ServiceError(Exception):
    """Error base de la capa de servicios; el mensaje llega tal cual al cliente."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(ServiceError):
    pass


class InvalidDataError(ServiceError):
    pass


class ConflictError(ServiceError):
    pass
