# -*- coding: utf-8 -*-
"""
I/O helpers for loading trip capacity problems.

Text stream format (stdin):
    n k
    w1 w2 ... wn
Tokens are whitespace separated; line breaks are not significant.

JSON format:
    {"trips": k, "items": [{"id": "...", "weight": <int>}, ...]}
or  {"trips": k, "weights": [<int>, ...]}

Both map directly to planning.state.ProblemState.
"""

from __future__ import annotations
import json
from typing import List, TextIO

from trip_capacity.business_objects.errors import SchemaError
from trip_capacity.business_objects.items import Item
from trip_capacity.planning import ProblemState


def _require(obj: dict, key: str, path: str) -> object:
    if key not in obj:
        raise SchemaError(f"{path}: missing required key '{key}' in object {obj}")
    return obj[key]


def _to_int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError as e:
        raise SchemaError(f"Invalid value {token!r} for {what}: expected an integer.") from e


def _json_int(value: object, what: str) -> int:
    # JSON floats such as 3.0 are not accepted as weights.
    if isinstance(value, bool) or not isinstance(value, int):
        raise SchemaError(f"Invalid value {value!r} for {what}: expected an integer.")
    return value


def parse_problem_text(text: str) -> ProblemState:
    """
    Parse the `n k` header followed by exactly n weights.

    Raises SchemaError for format problems; StateValidationError (from the
    business objects) for values that violate domain constraints.
    """
    tokens = text.split()
    if len(tokens) < 2:
        raise SchemaError("Invalid input format: expected 'N K' on the first line.")

    n = _to_int(tokens[0], "N")
    k = _to_int(tokens[1], "K")
    weights = [_to_int(tok, f"weight #{i}") for i, tok in enumerate(tokens[2:], start=1)]
    if len(weights) != n:
        raise SchemaError(
            f"N not equal to the number of weights provided. "
            f"Expected {n} but received {len(weights)}"
        )
    return ProblemState.from_weights(weights, k, expected_count=n)


def read_problem_stream(stream: TextIO) -> ProblemState:
    return parse_problem_text(stream.read())


def read_problem_json(path: str) -> ProblemState:
    """
    Load a problem from a JSON object. It must have:
      - trips (int)
      - items ([{id, weight}]) or weights ([int])
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except Exception as e:
        raise SchemaError(f"{path}: failed to read/parse JSON: {e}") from e

    if not isinstance(data, dict):
        raise SchemaError(f"{path}: expected a JSON object.")

    trips = _json_int(_require(data, "trips", path), f"{path}: trips")

    if "items" in data:
        raw = data["items"]
        if not isinstance(raw, list):
            raise SchemaError(f"{path}: 'items' must be a JSON array.")
        items: List[Item] = []
        for idx, obj in enumerate(raw, start=1):
            if not isinstance(obj, dict):
                raise SchemaError(f"{path}[{idx}]: expected an object.")
            iid = str(_require(obj, "id", path))
            weight = _json_int(_require(obj, "weight", path), f"{path}[{idx}].weight")
            items.append(Item(id=iid, weight=weight))
        return ProblemState(items=items, trips=trips)

    raw = _require(data, "weights", path)
    if not isinstance(raw, list):
        raise SchemaError(f"{path}: 'weights' must be a JSON array.")
    weights = [_json_int(w, f"{path}: weights[{i}]") for i, w in enumerate(raw)]
    return ProblemState.from_weights(weights, trips)
