"""intlroute: locale-aware pathname routing for multi-locale web apps.

Maps public, localized pathnames to canonical route templates and back,
and decides which locale and domain govern a request. Every operation is
a pure function of its inputs.

Basic usage::

    from intlroute import LocalePrefix, RoutingConfig, localized_pathname, resolve_request

    config = RoutingConfig(
        locales=("en", "de"),
        default_locale="en",
        locale_prefix=LocalePrefix(mode="as-needed"),
        pathnames={"/about": {"en": "/about", "de": "/ueber-uns"}},
    )

    resolution = resolve_request(config, "/de/ueber-uns")
    resolution.locale    # "de"
    resolution.template  # "/about"

    localized_pathname(config, "/about", "de")  # "/de/ueber-uns"
"""

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "DomainConfig",
    "IntlRouteError",
    "LocalePrefix",
    "PathnameMatch",
    "Resolution",
    "RoutingConfig",
    "best_domain",
    "localized_pathname",
    "match_locale_prefix",
    "resolve_request",
    "resolve_template",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import intlroute`` fast while providing a clean top-level API.
    """
    if name in ("DomainConfig", "LocalePrefix", "RoutingConfig"):
        from intlroute import config as _config

        return getattr(_config, name)

    if name in ("Resolution", "localized_pathname", "resolve_request"):
        from intlroute import resolution as _resolution

        return getattr(_resolution, name)

    if name in ("PathnameMatch", "match_locale_prefix"):
        from intlroute import prefixes as _prefixes

        return getattr(_prefixes, name)

    if name == "best_domain":
        from intlroute.domains import best_domain

        return best_domain

    if name == "resolve_template":
        from intlroute.routing.resolver import resolve_template

        return resolve_template

    if name in ("ConfigurationError", "IntlRouteError"):
        from intlroute import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
