"""YAML/JSON loader + schema validation for recipe tables.

Provides entrypoints to parse a recipe document, normalize keys, validate it
against the packaged JSON schema, and return a `RecipeBook`. JSON documents are
accepted as well since ``yaml.safe_load`` parses them.
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Union

import jsonschema
import yaml

from aspectgraph.logging import get_logger
from aspectgraph.model.recipes import RecipeBook

logger = get_logger(__name__)

RECOGNIZED_KEYS = {"primal", "compound", "combinations"}


def normalize_keys(data: Dict[Any, Any]) -> Dict[str, Any]:
    """Return ``data`` with every key converted to ``str``.

    YAML 1.1 turns keys such as ``on``/``off``/``yes``/``no`` into booleans;
    those become ``"True"``/``"False"`` like any other non-string key.
    """
    return {str(key): value for key, value in data.items()}


def load_recipe_data(text: str) -> Dict[str, Any]:
    """Load, normalize, and validate a recipe document.

    Args:
        text: YAML or JSON document.

    Returns:
        Canonical dictionary with ``primal``, ``compound`` and ``combinations``.

    Raises:
        ValueError: If the document does not have the expected shape.
        jsonschema.ValidationError: If the document violates the schema.
    """
    data = yaml.safe_load(text)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The recipe document must map to a dictionary at top-level.")

    # Early shape checks give clearer messages than the schema error
    for section in ("primal", "compound"):
        if section not in data:
            raise ValueError(f"Missing required '{section}' list")
        if not isinstance(data[section], list):
            raise ValueError(f"'{section}' must be a list")

    combinations = data.get("combinations")
    if combinations is None:
        data["combinations"] = {}
    elif not isinstance(combinations, dict):
        raise ValueError("'combinations' must be a mapping")
    else:
        data["combinations"] = normalize_keys(combinations)
        for compound, components in data["combinations"].items():
            if not isinstance(components, list):
                raise ValueError(
                    f"Recipe for '{compound}' must be a list of component aspects"
                )

    extra = set(data.keys()) - RECOGNIZED_KEYS
    if extra:
        raise ValueError(
            f"Unrecognized top-level key(s) in recipe table: {', '.join(sorted(extra))}. "
            f"Allowed keys are {sorted(RECOGNIZED_KEYS)}"
        )

    with (
        resources.files("aspectgraph.schemas")
        .joinpath("recipes.json")
        .open("r", encoding="utf-8")
    ) as f:
        schema_data = json.load(f)

    jsonschema.validate(data, schema_data)
    return data


def load_recipe_yaml(text: str) -> RecipeBook:
    """Parse a YAML or JSON string into a `RecipeBook`."""
    return RecipeBook.from_dict(load_recipe_data(text))


def load_recipe_book(path: Union[str, Path]) -> RecipeBook:
    """Read a recipe file from disk.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
    """
    path = Path(path)
    book = load_recipe_yaml(path.read_text(encoding="utf-8"))
    logger.debug(
        "Loaded %d primal and %d compound aspects from %s",
        len(book.primal),
        len(book.compound),
        path,
    )
    return book


def load_default_recipe_book() -> RecipeBook:
    """Load the packaged aspect table (``aspectgraph/data/aspects.json``)."""
    text = (
        resources.files("aspectgraph.data")
        .joinpath("aspects.json")
        .read_text(encoding="utf-8")
    )
    return load_recipe_yaml(text)
