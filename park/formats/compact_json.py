"""
Compact JSON formatter for park files.

Flat objects and arrays of primitives (coordinates, tile elements, car
records) are written on a single line; everything else is indented.
"""

import json


def _is_primitive(value) -> bool:
    return value is None or isinstance(value, (bool, int, float, str))


def _is_flat(value) -> bool:
    if isinstance(value, list):
        return all(_is_primitive(item) for item in value)
    if isinstance(value, dict):
        return all(_is_primitive(item) for item in value.values())
    return False


def dumps(obj, indent: int = 2) -> str:
    """Serialize obj to a JSON string, keeping flat containers on one line."""

    def format_value(value, level: int) -> str:
        if _is_primitive(value) or _is_flat(value):
            return json.dumps(value)

        pad = " " * (indent * level)
        child_pad = " " * (indent * (level + 1))

        if isinstance(value, list):
            if not value:
                return "[]"
            items = [child_pad + format_value(item, level + 1) for item in value]
            return "[\n" + ",\n".join(items) + "\n" + pad + "]"

        if isinstance(value, dict):
            if not value:
                return "{}"
            items = [
                f"{child_pad}{json.dumps(key)}: {format_value(item, level + 1)}"
                for key, item in value.items()
            ]
            return "{\n" + ",\n".join(items) + "\n" + pad + "}"

        return json.dumps(value)

    return format_value(obj, 0)


def dump(obj, fp, indent: int = 2):
    """Serialize obj to a file-like object."""
    fp.write(dumps(obj, indent))
    fp.write("\n")


def load(fp):
    return json.load(fp)


def loads(text: str):
    return json.loads(text)
