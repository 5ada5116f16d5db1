"""Locale prefix computation and matching.

Each locale maps to a prefix (``/en`` unless overridden). Incoming
pathnames are matched against the prefixes longest first, so ``/en-US``
is tried before ``/en``.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from intlroute.config import DomainConfig, LocalePrefix


@dataclass(frozen=True, slots=True)
class PathnameMatch:
    """Result of matching a pathname against the locale prefixes.

    ``matched_prefix`` is the slice of the original pathname that the
    prefix covered, in its original case. ``exact`` is ``False`` when
    only a case-insensitive comparison matched (``/EN`` for ``/en``).
    """

    locale: str
    prefix: str
    matched_prefix: str
    exact: bool


def locale_prefix(locale: str, config: LocalePrefix) -> str:
    """Return the prefix for *locale*: its override, else ``/<locale>``.

    Overrides are ignored when the mode is ``never``.
    """
    if config.mode != "never":
        override = config.prefixes.get(locale)
        if override:
            return override
    return f"/{locale}"


def locale_prefixes(
    locales: Iterable[str],
    config: LocalePrefix,
    *,
    sort: bool = True,
) -> list[tuple[str, str]]:
    """Return ``(locale, prefix)`` pairs, longest prefix first when *sort* is set."""
    prefixes = [(locale, locale_prefix(locale, config)) for locale in locales]
    if sort:
        prefixes.sort(key=lambda pair: len(pair[1]), reverse=True)
    return prefixes


def _domain_priority(locale: str, domain: DomainConfig) -> int:
    if locale == domain.default_locale:
        return 0
    if locale in domain.locales:
        return 1
    return 2


def _matches_prefix(pathname: str, prefix: str) -> bool:
    return pathname == prefix or pathname.startswith(prefix + "/")


def match_locale_prefix(
    pathname: str,
    locales: Iterable[str],
    config: LocalePrefix,
    domain: DomainConfig | None = None,
) -> PathnameMatch | None:
    """Find the locale whose prefix starts *pathname*.

    With a *domain*, its default locale is tried first, then the locales
    it supports, then the rest. Within each group the longest-first order
    holds.

    Each candidate is compared case-sensitively, then case-insensitively,
    before moving on. The first candidate to match either way wins, so a
    higher-priority case-insensitive match beats a lower-priority exact
    one.
    """
    candidates = locale_prefixes(locales, config)
    if domain is not None:
        candidates.sort(key=lambda pair: _domain_priority(pair[0], domain))

    lowered = pathname.lower()
    for locale, prefix in candidates:
        if _matches_prefix(pathname, prefix):
            exact = True
        elif _matches_prefix(lowered, prefix.lower()):
            exact = False
        else:
            continue
        return PathnameMatch(
            locale=locale,
            prefix=prefix,
            matched_prefix=pathname[: len(prefix)],
            exact=exact,
        )

    return None
