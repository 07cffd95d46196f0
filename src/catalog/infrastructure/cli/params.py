"""Shared click parameter types and input helpers."""

from __future__ import annotations

import json
from pathlib import Path

import click


class SizeParamType(click.ParamType):
    """A size argument: all digits means a numeric size, anything else a label.

    ``8`` becomes the number 8; ``M`` and ``8.5`` stay strings.
    """

    name = "size"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        value = str(value).strip()
        if value.isdigit():
            return int(value)
        return value


SIZE = SizeParamType()


def read_json(path: Path):
    """Load a JSON document given on the command line."""
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"'{path}' is not valid JSON: {exc}")
