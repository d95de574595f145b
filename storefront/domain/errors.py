# storefront/domain/errors.py


class StoreError(Exception):
    """Bazowy wyjatek domenowy, mapowany na status HTTP w warstwie api."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(StoreError):
    status_code = 400


class Unauthorized(StoreError):
    status_code = 401


class Forbidden(StoreError):
    status_code = 403


class NotFound(StoreError):
    status_code = 404


class Conflict(StoreError):
    status_code = 409


class InvalidStatusTransition(Conflict):
    pass


class InsufficientStock(StoreError):
    status_code = 400

    def __init__(self, product_name: str, available: int | None = None):
        message = f"Not enough stock for '{product_name}'"
        if available is not None:
            message += f" (available: {available})"
        super().__init__(message)
        self.product_name = product_name
        self.available = available


class EmptyCart(StoreError):
    status_code = 400

    def __init__(self, message: str = "Cart is empty"):
        super().__init__(message)


class ServerError(StoreError):
    status_code = 500
