# Copyright (C) 2024 the formvalidator-http authors.

"""
HTTP method names.
"""

# All known methods
METHODS = (
    "connect",
    "delete",
    "get",
    "head",
    "options",
    "patch",
    "post",
    "put",
    "trace",
)

# Methods with a named constraint
CONSTRAINT_METHODS = (
    "DELETE",
    "GET",
    "OPTIONS",
    "POST",
    "PUT",
    "TRACE",
)


def is_known_method(name: str) -> bool:
    """
    Check whether a name is a known HTTP method (case-insensitive).
    """
    return isinstance(name, str) and name.lower() in METHODS
