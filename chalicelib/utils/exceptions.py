__all__ = ["RecordNotFound", "ValidationException", "OrderNotFound"]


# Store exceptions
class RecordNotFound(Exception):
    pass


# Validations exceptions
class ValidationException(Exception):
    LEVEL = 'warning'


class OrderNotFound(Exception):
    LEVEL = 'warning'
