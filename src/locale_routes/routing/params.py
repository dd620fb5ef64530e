"""Path parameter converters used when building paths.

``{id:int}`` only accepts values whose text form matches the ``int``
pattern. ``{slug}`` is shorthand for ``{slug:str}``.
"""

import re

# converter name -> pattern the rendered value must fully match
CONVERTERS: dict[str, str] = {
    "str": r"[^/]+",
    "int": r"\d+",
    "float": r"\d+(?:\.\d+)?",
    "path": r".+",
}


def format_param(value: object, param_type: str) -> str | None:
    """Render *value* for a ``{name:param_type}`` segment.

    Returns ``None`` when the rendered value would not match the
    converter's pattern, so the caller can report a build error.
    Raises ``KeyError`` if *param_type* is not a registered converter.
    """
    text = str(value)
    if not re.fullmatch(CONVERTERS[param_type], text):
        return None
    return text
