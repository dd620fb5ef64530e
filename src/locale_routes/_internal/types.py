"""Shared type aliases used across locale-routes modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler: user-defined function with variable signature
Handler: TypeAlias = Callable[..., Any]

# Capability probe: "does a route helper with this name exist?"
NameProbe: TypeAlias = Callable[[str], bool]
