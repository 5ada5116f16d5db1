"""Request-level locale and route resolution.

Ties the pieces together in the order a request needs them::

    pathname -> sanitize -> domain (from host) -> locale prefix
             -> strip prefix -> canonical template + params

and in reverse, for building links and redirect targets::

    canonical template + locale + params -> localized pathname

Usage::

    resolution = resolve_request(config, "/de/neuigkeiten/42", {"host": "example.de"})
    resolution.locale             # "de"
    resolution.template           # "/news/[articleId]"
    resolution.params             # {"articleId": "42"}
    resolution.internal_pathname  # "/de/news/42"

    localized_pathname(config, "/news/[articleId]", "de", {"articleId": "42"})
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from intlroute.config import DomainConfig, RoutingConfig
from intlroute.domains import best_domain, find_domain, get_host
from intlroute.pathnames import (
    append_suffix,
    apply_base_path,
    extract_params,
    normalize_trailing_slash,
    render_template,
    render_with_prefix,
    sanitize_pathname,
    strip_recognized_prefix,
)
from intlroute.prefixes import PathnameMatch, locale_prefix, match_locale_prefix
from intlroute.routing.resolver import localized_template, resolve_template
from intlroute.routing.template import parse_template

logger = logging.getLogger("intlroute.resolution")


@dataclass(frozen=True, slots=True)
class Resolution:
    """Everything known about an incoming pathname."""

    locale: str
    pathname: str
    unprefixed_pathname: str
    internal_pathname: str
    prefix_match: PathnameMatch | None = None
    domain: DomainConfig | None = None
    template: str | None = None
    template_locale: str | None = None
    params: dict[str, str | None] = field(default_factory=dict)

    @property
    def redirect_needed(self) -> bool:
        """True when the pathname is not in its canonical public form.

        Either the prefix only matched case-insensitively (``/EN/about``),
        or the route matched another locale's localized template.
        """
        if self.prefix_match is not None and not self.prefix_match.exact:
            return True
        return self.template_locale is not None and self.template_locale != self.locale


def _choose_locale(
    config: RoutingConfig,
    prefix_match: PathnameMatch | None,
    domain: DomainConfig | None,
    fallback_locale: str | None,
) -> str:
    if prefix_match is not None:
        return prefix_match.locale
    if fallback_locale is not None and fallback_locale in config.locales:
        return fallback_locale
    if domain is not None:
        return domain.default_locale
    return config.default_locale


def resolve_request(
    config: RoutingConfig,
    pathname: str,
    headers: Mapping[str, str] | None = None,
    *,
    fallback_locale: str | None = None,
) -> Resolution:
    """Resolve the locale, canonical template and params of *pathname*.

    *headers* supplies the host for domain-based routing. *fallback_locale*
    is the caller's negotiated locale (cookie, ``Accept-Language``), used
    when the pathname carries no prefix; it is ignored unless configured.
    """
    trailing_slash = config.trailing_slash
    pathname = sanitize_pathname(pathname)

    domain = None
    if headers is not None and config.domains:
        domain = find_domain(get_host(headers), config.domains)

    prefix_match = match_locale_prefix(pathname, config.locales, config.locale_prefix, domain)
    locale = _choose_locale(config, prefix_match, domain, fallback_locale)
    unprefixed = strip_recognized_prefix(
        pathname,
        config.locales,
        config.locale_prefix,
        trailing_slash=trailing_slash,
    )

    template_locale, template = None, None
    if config.pathnames:
        template_locale, template = resolve_template(
            config.pathnames,
            unprefixed,
            locale,
            trailing_slash=trailing_slash,
        )

    if template is None:
        params: dict[str, str | None] = {}
        internal = normalize_trailing_slash(append_suffix(unprefixed, f"/{locale}"), trailing_slash=trailing_slash)
    else:
        source = localized_template(config.pathnames[template], template_locale or locale, template)
        found = extract_params(source, unprefixed, trailing_slash=trailing_slash)
        if found is None:
            # Only the canonical form matched
            source = template
            found = extract_params(template, unprefixed, trailing_slash=trailing_slash) or {}
        params = found
        internal = render_with_prefix(
            unprefixed,
            source,
            template,
            locale,
            trailing_slash=trailing_slash,
        )

    logger.debug(
        "Resolved %r: locale=%r template=%r domain=%r",
        pathname,
        locale,
        template,
        domain.domain if domain else None,
    )
    return Resolution(
        locale=locale,
        pathname=pathname,
        unprefixed_pathname=unprefixed,
        internal_pathname=internal,
        prefix_match=prefix_match,
        domain=domain,
        template=template,
        template_locale=template_locale,
        params=params,
    )


def localized_pathname(
    config: RoutingConfig,
    template: str,
    locale: str,
    params: Mapping[str, object] | None = None,
    *,
    current_domain: DomainConfig | None = None,
    search: str | None = None,
) -> str:
    """Render the public pathname of *template* for *locale*.

    The locale prefix is added in ``always`` mode, and in ``as-needed``
    mode unless *locale* is the default of the serving domain (or of the
    application, without domains). ``never`` adds no prefix. The base
    path and *search* (``?query`` / ``#fragment``) come last.

    Optional catch-alls missing from *params* render as zero segments;
    other tokens without a value stay in place.
    """
    trailing_slash = config.trailing_slash

    entry = config.pathnames.get(template)
    target = template if entry is None else localized_template(entry, locale, template)

    # An optional catch-all without a value renders as zero segments
    values: dict[str, object] = {
        token.name: None for token in parse_template(target) if token.kind == "optional_catch_all"
    }
    values.update(params or {})
    pathname = normalize_trailing_slash(render_template(target, values), trailing_slash=trailing_slash)

    domain = best_domain(current_domain, locale, config.domains) if config.domains else None
    default_locale = domain.default_locale if domain is not None else config.default_locale

    mode = config.locale_prefix.mode
    prefix = None
    if mode == "always" or (mode == "as-needed" and locale != default_locale):
        prefix = locale_prefix(locale, config.locale_prefix)

    pathname = normalize_trailing_slash(append_suffix(pathname, prefix), trailing_slash=trailing_slash)
    if config.base_path:
        pathname = apply_base_path(pathname, config.base_path, trailing_slash=trailing_slash)
    return append_suffix(pathname, search=search)
