"""intlroute exception hierarchy.

A missing locale, template or parameter is never an error: lookups return
``None`` instead. Exceptions are reserved for configuration that cannot be
used at all.
"""


class IntlRouteError(Exception):
    """Base for all intlroute-specific errors."""


class ConfigurationError(IntlRouteError):
    """Raised when routing configuration is inconsistent.

    Typically raised by ``RoutingConfig`` at construction time.
    """
