"""Locale selection from the request host.

Patterns are shell-style globs matched case-insensitively against the
host without its port::

    locale_from_host("shop.example.fr:8443", {"*.fr": "fr", "*.com": "en"})
    # "fr"
"""

from collections.abc import Mapping
from fnmatch import fnmatchcase


def locale_from_host(host: str, host_locales: Mapping[str, str]) -> str | None:
    """Return the locale of the first pattern matching *host*, or ``None``.

    Patterns are tried in declaration order.
    """
    hostname = host.rsplit(":", 1)[0] if host.count(":") == 1 else host
    hostname = hostname.lower()
    for pattern, locale in host_locales.items():
        if fnmatchcase(hostname, pattern.lower()):
            return locale
    return None
