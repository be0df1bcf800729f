class ServiceError(Exception):
    """Base class for errors that map to an HTTP response."""

    status_code = 500
    message = "Internal Server Error"

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self, development: bool = False) -> dict:
        return {"error": self.message}


class ValidationError(ServiceError):
    status_code = 400
    message = "Requête invalide"


class NotFoundError(ServiceError):
    status_code = 404
    message = "Not Found"


class ConflictError(ServiceError):
    status_code = 400
    message = "Vous avez déjà voté pour ce jeu"


class DatabaseConnectionError(ServiceError):
    status_code = 500
    message = "Database not connected"


class UnexpectedError(ServiceError):
    status_code = 500
    message = "Internal Server Error"

    def __init__(self, detail: str = ""):
        super().__init__()
        self.detail = detail

    def to_dict(self, development: bool = False) -> dict:
        return {
            "error": self.message,
            "message": self.detail if development else "Something went wrong",
        }
