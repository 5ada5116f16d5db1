"""Pathname rendering and normalization.

Helpers that turn templates back into concrete pathnames, strip and add
locale prefixes, and sanitize untrusted input. Every function is pure.
"""

import re
from collections.abc import Iterable, Mapping

from intlroute.config import LocalePrefix
from intlroute.prefixes import locale_prefixes
from intlroute.routing.template import compile_template, parse_template

_MULTI_SLASH_RE = re.compile(r"/+")
_ROOT_WITH_QUERY_RE = re.compile(r"/(\?.*)?")


def normalize_trailing_slash(pathname: str, *, trailing_slash: bool = False) -> str:
    """Add or remove the final ``/`` according to the trailing-slash policy.

    The root pathname ``/`` is returned unchanged under either policy.
    """
    if pathname == "/":
        return pathname
    ends_with_slash = pathname.endswith("/")
    if trailing_slash and not ends_with_slash:
        return pathname + "/"
    if not trailing_slash and ends_with_slash:
        return pathname[:-1]
    return pathname


def matches_pathname(template: str, pathname: str, *, trailing_slash: bool = False) -> bool:
    """Check whether *pathname* is an instance of *template*.

    Both sides are normalized with the same trailing-slash policy first.
    """
    matcher = compile_template(normalize_trailing_slash(template, trailing_slash=trailing_slash))
    return matcher.matches_exactly(normalize_trailing_slash(pathname, trailing_slash=trailing_slash))


def extract_params(
    template: str,
    pathname: str,
    *,
    trailing_slash: bool = False,
) -> dict[str, str | None] | None:
    """Capture the parameter values *pathname* gives to *template*.

    Examples::

        >>> extract_params("/news/[articleId]", "/news/42")
        {'articleId': '42'}
        >>> extract_params("/categories/[[...slug]]", "/categories")
        {'slug': None}
        >>> extract_params("/news/[articleId]", "/about") is None
        True
    """
    normalized_template = normalize_trailing_slash(template, trailing_slash=trailing_slash)
    normalized_pathname = normalize_trailing_slash(pathname, trailing_slash=trailing_slash)

    values = compile_template(normalized_template).match(normalized_pathname)
    if values is None:
        return None
    tokens = parse_template(normalized_template)
    return {token.name: value for token, value in zip(tokens, values, strict=True)}


def render_template(template: str, params: Mapping[str, object] | None = None) -> str:
    """Substitute *params* into *template*.

    ``[[...name]]`` is rendered like ``[...name]``. A ``None`` value renders
    as an empty string; a token with no entry in *params* is left as is.
    Without *params* the template is returned unchanged.
    """
    if params is None:
        return template

    result = template.replace("[[", "[").replace("]]", "]")
    for token in parse_template(template):
        if token.name not in params:
            continue
        value = params[token.name]
        result = result.replace(token.placeholder, "" if value is None else str(value), 1)
    return result


def render_with_prefix(
    source_pathname: str,
    source_template: str,
    target_template: str,
    prefix: str | None = None,
    *,
    trailing_slash: bool = False,
) -> str:
    """Re-render *source_pathname* through *target_template*.

    Params are read from the source using *source_template*. When *prefix*
    is given the result starts with ``/<prefix>``. An empty optional
    catch-all leaves no dangling slash unless the trailing-slash policy
    asks for one::

        >>> render_with_prefix("/kategorien", "/kategorien/[[...slug]]", "/categories/[[...slug]]", "en")
        '/en/categories'
    """
    params = extract_params(source_template, source_pathname, trailing_slash=trailing_slash)
    target = f"/{prefix}" if prefix else ""
    target += render_template(target_template, params)
    return normalize_trailing_slash(target, trailing_slash=trailing_slash)


def strip_recognized_prefix(
    pathname: str,
    locales: Iterable[str],
    locale_prefix: LocalePrefix,
    *,
    trailing_slash: bool = False,
) -> str:
    """Remove a leading locale prefix, matched case-insensitively.

    The residual pathname is what template resolution works on::

        >>> strip_recognized_prefix("/EN/about", ["en", "de"], LocalePrefix())
        '/about'
        >>> strip_recognized_prefix("/en", ["en", "de"], LocalePrefix())
        '/'
    """
    # Trailing slash makes "/en" and "/en/about" match the same way
    if not pathname.endswith("/"):
        pathname += "/"

    alternation = "|".join(re.escape(prefix) for _, prefix in locale_prefixes(locales, locale_prefix))
    m = re.match(f"({alternation})/(.*)", pathname, re.IGNORECASE)

    result = "/" + m.group(2) if m else pathname
    if result != "/":
        result = normalize_trailing_slash(result, trailing_slash=trailing_slash)
    return result


def sanitize_pathname(pathname: str) -> str:
    """Neutralize pathnames that could be read as another host.

    Backslashes are percent-encoded (some clients treat them as ``/``)
    and repeated slashes collapse::

        >>> sanitize_pathname("/en//\\\\evil.com")
        '/en/%5Cevil.com'
        >>> sanitize_pathname("/en////evil.com")
        '/en/evil.com'
    """
    return _MULTI_SLASH_RE.sub("/", pathname.replace("\\", "%5C"))


def prefix_pathname(prefix: str, pathname: str) -> str:
    """Join *prefix* and *pathname* without a slash after the prefix for the root."""
    if _ROOT_WITH_QUERY_RE.fullmatch(pathname):
        pathname = pathname[1:]
    return prefix + pathname


def append_suffix(pathname: str, prefix: str | None = None, search: str | None = None) -> str:
    """Prefix *pathname* and append a query/fragment suffix, each optional."""
    result = pathname
    if prefix:
        result = prefix_pathname(prefix, result)
    if search:
        result += search
    return result


def apply_base_path(pathname: str, base_path: str, *, trailing_slash: bool = False) -> str:
    """Mount *pathname* below *base_path*."""
    return normalize_trailing_slash(base_path + pathname, trailing_slash=trailing_slash)
