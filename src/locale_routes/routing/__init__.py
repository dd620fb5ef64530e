"""Routing — the ordered table localized variants are registered into.

Variants are added in precedence order during setup, looked up by name
when building paths, and frozen together with the route set.
"""
