"""
Errores de dominio del API del menú.

Los routers lanzan estas excepciones y los handlers registrados en
``app.main`` las convierten en respuestas ``{"error": "<mensaje>"}``.
"""
from fastapi import status


class MenuAppError(Exception):
    """Error base: mensaje legible para el cliente y código HTTP."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Request failed"

    def __init__(self, message: str = None, status_code: int = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(MenuAppError):
    """Entrada ausente o mal formada (id faltante, precio no numérico...)."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class NotFoundError(MenuAppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class ConflictError(MenuAppError):
    """Operación bloqueada por registros dependientes."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Operation conflicts with existing data"


class StorageError(MenuAppError):
    # El mensaje nunca incluye detalles internos de la base de datos
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Unexpected storage error"


class AuthenticationError(MenuAppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authenticated"
