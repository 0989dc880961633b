# Copyright (C) 2024 the formvalidator-http authors.

"""
Creates validation input from HTTP requests.

The request method has to be placed into the input in order for the
method constraints to check it.
"""
from __future__ import annotations
import typing

import logging
from collections.abc import Mapping
from urllib.parse import parse_qsl, urlparse

import requests


def _encoded_params(params: typing.Any) -> list[tuple[typing.Any, typing.Any]]:
    """
    Get key-value pairs from a query string or an urlencoded body.
    """
    if not params:
        return []

    if isinstance(params, bytes):
        params = params.decode("utf-8", errors="replace")

    if isinstance(params, str):
        return parse_qsl(params)

    return requests.utils.to_key_val_list(params)


def _prepared_input(request: requests.PreparedRequest) -> dict[str, typing.Any]:
    params = {}

    if request.url:
        params.update(_encoded_params(urlparse(request.url).query))

    if request.headers.get("Content-Type", "").startswith("application/x-www-form-urlencoded"):
        params.update(_encoded_params(request.body))

    return params


def method_input(request: typing.Any, field: str = "method") -> dict[str, typing.Any]:
    """
    Get the parameters of a request with the request method added.

    requests.Request objects are prepared first, so they result in the same
    input as their prepared form.

    :param request: requests.Request, requests.PreparedRequest or any object with a 'method' attribute.
    :param field: Name of the input field that holds the method.
    :type field: str
    """
    params = {}

    if isinstance(request, requests.Request):
        try:
            request = request.prepare()

        except requests.exceptions.RequestException as err:
            # URL cannot be prepared, e.g. missing or invalid
            logging.debug(f"Could not prepare request: {err}")
            params.update(_encoded_params(request.params))

            if isinstance(request.data, Mapping):
                params.update(request.data)

    if isinstance(request, requests.PreparedRequest):
        params.update(_prepared_input(request))

    params[field] = getattr(request, "method", None)

    return params
