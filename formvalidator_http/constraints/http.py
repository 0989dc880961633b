# Copyright (C) 2024 the formvalidator-http authors.

"""
Constraint methods for checking HTTP request methods.

Example profile for a host validator:

    profile = {
        "required": ["method", "author"],
        "constraint_methods": {
            "method": POST,
        },
    }

If the request method placed into the input is not 'POST', the
validation is not successful.
"""
from __future__ import annotations
import typing

import logging

from formvalidator_http.constraints.context import ConstraintContext, ValueContext

__all__ = [
    "http_method",
    "DELETE",
    "GET",
    "OPTIONS",
    "POST",
    "PUT",
    "TRACE",
]


class HTTPMethodConstraint:
    """
    Checks whether the current value equals an HTTP method name.
    """

    def __init__(self, method: str, field_name: str = "method") -> None:
        """
        Create a new constraint for a method.

        :param method: Name of the HTTP method the value must match (case-insensitive).
        :type method: str
        :param field_name: Name reported to the validator context.
        :type field_name: str
        """
        self.method = method
        self.field_name = field_name

        # Non-string method names never match
        self._match = method.lower() if isinstance(method, str) else None

    def __call__(self, context: ConstraintContext | typing.Any) -> bool:
        if not isinstance(context, ConstraintContext):
            context = ValueContext(context)

        context.name_this(self.field_name)
        value = context.get_current_constraint_value()

        if isinstance(value, str) and value and value.lower() == self._match:
            return True

        logging.debug(f"{self}: Value {value!r} does not match.")
        return False

    def __eq__(self, other):
        if not isinstance(other, HTTPMethodConstraint):
            return NotImplemented

        return (self._match, self.field_name) == (other._match, other.field_name)

    def __hash__(self):
        return hash((self._match, self.field_name))

    def __repr__(self):
        return f"<{type(self).__name__}<{self.method}>>"


def http_method(method: str, field_name: str = "method") -> HTTPMethodConstraint:
    """
    Returns a constraint method to determine whether or not a method is
    equal to the provided method name.

    :param method: Name of the HTTP method, e.g. 'POST'.
    :type method: str
    :param field_name: Name reported to the validator context.
    :type field_name: str
    """
    return HTTPMethodConstraint(method, field_name=field_name)


DELETE = http_method("DELETE")
GET = http_method("GET")
OPTIONS = http_method("OPTIONS")
POST = http_method("POST")
PUT = http_method("PUT")
TRACE = http_method("TRACE")
