# Copyright (C) 2024 the formvalidator-http authors.

"""
Interface between constraints and the host validator.
"""
from __future__ import annotations
import typing

from abc import ABC, abstractmethod


class ConstraintContext(ABC):
    """
    Interface for validator contexts passed to constraint methods.

    Host validators do not have to inherit from this class. Any object
    providing both methods is accepted as a context.
    """

    @abstractmethod
    def get_current_constraint_value(self) -> typing.Any:
        """
        Get the value of the field that is currently checked.
        """

    @abstractmethod
    def name_this(self, name: str) -> None:
        """
        Report the name of the constraint for error reporting.

        :param name: Name under which a failed check is reported.
        :type name: str
        """

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is ConstraintContext:
            if all(callable(getattr(subclass, attr, None))
                   for attr in ("get_current_constraint_value", "name_this")):
                return True

        return NotImplemented


class ValueContext(ConstraintContext):
    """
    Context wrapping a single value.
    """

    def __init__(self, value: typing.Any) -> None:
        self.value = value

        # Set by the constraint via name_this()
        self.name: str | None = None

    def get_current_constraint_value(self) -> typing.Any:
        return self.value

    def name_this(self, name: str) -> None:
        self.name = name

    def __repr__(self):
        return f"<{type(self).__name__}<{self.value!r}>>"
