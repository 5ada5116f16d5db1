"""Routing configuration.

All configuration values are frozen dataclasses: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Literal, get_args

from intlroute.errors import ConfigurationError

PrefixMode = Literal["always", "as-needed", "never"]

# A route table value: one template shared by every locale, or a
# per-locale mapping of localized templates.
LocalizedRouteEntry = str | Mapping[str, str]


@dataclass(frozen=True, slots=True)
class LocalePrefix:
    """How locales show up as a leading pathname segment.

    ``always``:    every locale is prefixed (``/en/about``, ``/de/about``)
    ``as-needed``: the default locale is unprefixed, all others prefixed
    ``never``:     no prefixes; the locale comes from the domain or a fallback

    ``prefixes`` overrides the ``/<locale>`` prefix per locale::

        LocalePrefix(mode="always", prefixes={"en-GB": "/uk"})
    """

    mode: PrefixMode = "always"
    prefixes: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class DomainConfig:
    """A host serving a subset of the application's locales."""

    domain: str
    default_locale: str
    locales: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class RoutingConfig:
    """Application routing configuration. Immutable after creation.

    Usage::

        config = RoutingConfig(
            locales=("en", "de"),
            default_locale="en",
            locale_prefix=LocalePrefix(mode="as-needed"),
            pathnames={
                "/": "/",
                "/about": {"en": "/about", "de": "/ueber-uns"},
                "/news/[articleId]": {"en": "/news/[articleId]", "de": "/neuigkeiten/[articleId]"},
            },
        )

    Template syntax is not checked here; malformed templates are a caller
    precondition.
    """

    locales: tuple[str, ...]
    default_locale: str
    locale_prefix: LocalePrefix = field(default_factory=LocalePrefix)
    pathnames: Mapping[str, LocalizedRouteEntry] = field(default_factory=dict)
    domains: tuple[DomainConfig, ...] = ()

    # Policy for the final slash of rendered and compared pathnames
    trailing_slash: bool = False

    # Prepended to rendered pathnames (e.g. "/docs" when mounted below the root)
    base_path: str = ""

    def __post_init__(self) -> None:
        if not self.locales:
            msg = "RoutingConfig.locales must contain at least one locale."
            raise ConfigurationError(msg)

        if self.default_locale not in self.locales:
            msg = (
                f"Default locale {self.default_locale!r} is not one of the "
                f"configured locales {list(self.locales)!r}."
            )
            raise ConfigurationError(msg)

        if self.locale_prefix.mode not in get_args(PrefixMode):
            msg = (
                f"Unknown locale prefix mode {self.locale_prefix.mode!r}. "
                f"Expected one of {list(get_args(PrefixMode))!r}."
            )
            raise ConfigurationError(msg)

        for locale, prefix in self.locale_prefix.prefixes.items():
            if locale not in self.locales:
                msg = f"Prefix override for unknown locale {locale!r}."
                raise ConfigurationError(msg)
            if not prefix.startswith("/"):
                msg = f"Prefix {prefix!r} for locale {locale!r} must start with '/'."
                raise ConfigurationError(msg)

        for domain in self.domains:
            unknown = [
                locale
                for locale in (domain.default_locale, *domain.locales)
                if locale not in self.locales
            ]
            if unknown:
                msg = f"Domain {domain.domain!r} references unknown locales {unknown!r}."
                raise ConfigurationError(msg)

        if self.base_path and (not self.base_path.startswith("/") or self.base_path.endswith("/")):
            msg = f"base_path {self.base_path!r} must start with '/' and must not end with '/'."
            raise ConfigurationError(msg)
