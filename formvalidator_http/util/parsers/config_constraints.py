# Copyright (C) 2024 the formvalidator-http authors.

"""
Loads the constraint configuration format.
"""
from __future__ import annotations
import typing

import json
import logging

import jsonschema
import yaml

from formvalidator_http.constraints.http import http_method
from formvalidator_http.util.errors import ConstraintConfigError, UnknownMethodError
from formvalidator_http.util.http_methods import is_known_method

if typing.TYPE_CHECKING:
    from pathlib import Path
    from formvalidator_http.constraints.http import HTTPMethodConstraint


CONFIG_SCHEMA = {
    "type": "object",
    "properties": {
        "constraint_methods": {
            "type": "object",
            "additionalProperties": {
                "type": "string",
            },
        },
    },
    "required": ["constraint_methods"],
    "additionalProperties": False,
}


def load_constraints(path: Path) -> dict[str, HTTPMethodConstraint]:
    """
    Load method constraints for input fields from JSON or YAML.

    :param path: Path to the constraint configuration file.
    :type path: pathlib.Path
    """
    logging.debug("Starting: Loading constraint configuration.")

    if not path.exists():
        raise ConstraintConfigError(f"Configuration in '{path}' does not exist.")

    if not path.is_file():
        raise ConstraintConfigError(f"{path} is not a file.")

    if path.suffix not in (".json", ".yaml", ".yml"):
        raise ConstraintConfigError(
            (f"Could not load constraint configuration from {path}. "
             "Expected '.json', '.yaml' or '.yml'"))

    with path.open() as configfile:
        try:
            if path.suffix == ".json":
                config = json.load(configfile)

            else:
                config = yaml.safe_load(configfile)

        except (json.JSONDecodeError, yaml.YAMLError) as err:
            raise ConstraintConfigError(f"Could not parse constraint configuration in {path}: {err}") from err

    logging.debug(f"Using constraint configuration file at: {path}")

    try:
        jsonschema.validate(config, CONFIG_SCHEMA)

    except jsonschema.ValidationError as err:
        raise ConstraintConfigError(f"Invalid constraint configuration in {path}: {err.message}") from err

    constraints = {}
    for field, method in config["constraint_methods"].items():
        if not is_known_method(method):
            raise UnknownMethodError(field, method)

        constraints[field] = http_method(method, field_name=field)
        logging.debug(f"Field '{field}' must match method '{method}'.")

    logging.debug(f"{len(constraints)} method constraints loaded.")

    return constraints
