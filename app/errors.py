"""Domain errors shared by services and API views."""


class NotFoundError(Exception):
    """Resource not found."""

    def __init__(self, message: str = "Resource not found"):
        self.message = message
        super().__init__(self.message)


class InvalidInputError(ValueError):
    """Malformed identifier or parameter bundle, rejected before computation."""

    def __init__(self, message: str = "Invalid input"):
        self.message = message
        super().__init__(self.message)
