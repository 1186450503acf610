# domain/exceptions.py
class ValidationError(Exception):
    """Malformed user input rejected before anything is dispatched."""


class NotFoundError(Exception):
    pass
