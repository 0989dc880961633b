# Copyright (C) 2024 the formvalidator-http authors.

"""
Errors and exceptions raised by formvalidator-http.
"""


class ConstraintConfigError(Exception):
    """
    Should be raised when a constraint configuration cannot be loaded.
    """
    pass


class UnknownMethodError(ConstraintConfigError):
    """
    Should be raised when a configuration references an HTTP method
    that is not known.
    """

    def __init__(self, field: str, method: str) -> None:
        super().__init__(f"Unknown HTTP method '{method}' for field '{field}'.")
        self.field = field
        self.method = method
