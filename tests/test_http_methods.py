"""
Tests for the HTTP method registry.
"""
import pytest

from formvalidator_http.util.http_methods import CONSTRAINT_METHODS, METHODS, is_known_method


def test_constraint_methods_are_known():
    for method in CONSTRAINT_METHODS:
        assert method.lower() in METHODS


@pytest.mark.parametrize("name,expected", [
    ("POST", True),
    ("patch", True),
    ("Connect", True),
    ("FETCH", False),
    ("", False),
    (None, False),
])
def test_is_known_method(name, expected):
    assert is_known_method(name) is expected
