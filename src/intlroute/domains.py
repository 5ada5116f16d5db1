"""Domain arbitration.

Picks which configured host should serve a locale, and which configured
domain an incoming request belongs to.
"""

from collections.abc import Iterable, Mapping

from intlroute.config import DomainConfig


def is_locale_supported_on_domain(locale: str, domain: DomainConfig) -> bool:
    return domain.default_locale == locale or locale in domain.locales


def best_domain(
    current_domain: DomainConfig | None,
    locale: str,
    domains: Iterable[DomainConfig],
) -> DomainConfig | None:
    """Return the domain that should serve *locale*.

    In order of preference:

    1. *current_domain*, if it supports *locale* (no host switch)
    2. the first domain whose default locale is *locale* (unprefixed URLs)
    3. the first domain that lists *locale*
    4. ``None``
    """
    if current_domain is not None and is_locale_supported_on_domain(locale, current_domain):
        return current_domain

    domains = tuple(domains)
    for domain in domains:
        if domain.default_locale == locale:
            return domain
    for domain in domains:
        if locale in domain.locales:
            return domain
    return None


def get_host(headers: Mapping[str, str]) -> str | None:
    """Return the request host, preferring ``x-forwarded-host`` over ``host``.

    *headers* is any mapping with lowercase header names (ASGI style).
    """
    return headers.get("x-forwarded-host") or headers.get("host") or None


def find_domain(host: str | None, domains: Iterable[DomainConfig]) -> DomainConfig | None:
    """Return the configured domain for *host*, or ``None``."""
    if not host:
        return None
    for domain in domains:
        if domain.domain == host:
            return domain
    return None
