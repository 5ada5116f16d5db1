"""Canonical template resolution.

Maps a prefix-stripped pathname back to the canonical template of the
route table, and to the locale whose localized template matched.
"""

import logging
from collections.abc import Mapping

from intlroute.config import LocalizedRouteEntry
from intlroute.pathnames import matches_pathname
from intlroute.routing.specificity import sort_templates

logger = logging.getLogger("intlroute.routing")


def localized_template(entry: LocalizedRouteEntry, locale: str, canonical: str) -> str:
    """Return the template *locale* uses for a route table entry.

    A shared string serves every locale. A per-locale mapping falls back
    to the canonical template for locales it does not translate.
    """
    if isinstance(entry, str):
        return entry
    return entry.get(locale) or canonical


def _candidate_locales(entry: Mapping[str, str], current_locale: str) -> list[str]:
    """Mapping order, with *current_locale* moved to the front when present."""
    locales = list(entry)
    if current_locale in locales:
        locales.remove(current_locale)
        locales.insert(0, current_locale)
    return locales


def resolve_template(
    pathnames: Mapping[str, LocalizedRouteEntry],
    pathname: str,
    current_locale: str,
    *,
    trailing_slash: bool = False,
) -> tuple[str | None, str | None]:
    """Find the canonical template that *pathname* is an instance of.

    Returns ``(locale, template)``:

    - ``(None, template)`` when a shared template matched; it implies no locale
    - ``(locale, template)`` when *locale*'s localized template matched
    - ``(None, template)`` when only the canonical template itself matched
    - ``(None, None)`` when nothing matched

    Templates are tried most specific first. When several localized
    templates of one route match, *current_locale* wins, so an ambiguous
    pathname never switches the request's locale.
    """
    for template in sort_templates(pathnames):
        entry = pathnames[template]

        if isinstance(entry, str):
            if matches_pathname(entry, pathname, trailing_slash=trailing_slash):
                logger.debug("Pathname %r matched shared template %r", pathname, template)
                return None, template
            continue

        for locale in _candidate_locales(entry, current_locale):
            candidate = localized_template(entry, locale, template)
            if matches_pathname(candidate, pathname, trailing_slash=trailing_slash):
                logger.debug(
                    "Pathname %r matched %r template %r for %r",
                    pathname,
                    locale,
                    candidate,
                    template,
                )
                return locale, template

    # Routes whose localized forms all differ from the canonical one can
    # still be requested by their canonical pathname.
    for template in pathnames:
        if matches_pathname(template, pathname, trailing_slash=trailing_slash):
            logger.debug("Pathname %r matched canonical template %r", pathname, template)
            return None, template

    return None, None
