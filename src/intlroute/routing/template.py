"""Route template parsing and compilation.

Templates use bracket tokens::

    "/news/[articleId]"         -> one segment
    "/docs/[...path]"           -> one or more trailing segments
    "/categories/[[...slug]]"   -> zero or more trailing segments

A template is scanned once, left to right. The same scan produces the
tokens and the regex groups, so captured values pair with tokens by
position.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal, cast

TokenKind = Literal["param", "catch_all", "optional_catch_all"]

_TOKEN_RE = re.compile(
    r"\[\[\.\.\.(?P<optional_catch_all>[^\]]+)\]\]"
    r"|\[\.\.\.(?P<catch_all>[^\]]+)\]"
    r"|\[(?P<param>[^\]]+)\]"
)

# Regex fragment for each token kind. The optional catch-all swallows its
# leading separator so "/categories/[[...slug]]" also matches "/categories".
_PATTERNS: dict[TokenKind, str] = {
    "param": r"([^/]+)",
    "catch_all": r"(.+)",
    "optional_catch_all": r"(?:/(.*))?",
}


@dataclass(frozen=True, slots=True)
class TemplateToken:
    """A bracket token of a route template.

    Param:              ``[id]``        (kind="param", name="id")
    Catch-all:          ``[...path]``   (kind="catch_all", name="path")
    Optional catch-all: ``[[...slug]]`` (kind="optional_catch_all", name="slug")
    """

    kind: TokenKind
    name: str

    @property
    def placeholder(self) -> str:
        """Substitution form, with optional catch-alls collapsed to ``[...name]``."""
        if self.kind == "param":
            return f"[{self.name}]"
        return f"[...{self.name}]"


def _scan(template: str) -> list[str | TemplateToken]:
    """Split *template* into literal strings and tokens, in order."""
    parts: list[str | TemplateToken] = []
    pos = 0
    for m in _TOKEN_RE.finditer(template):
        if m.start() > pos:
            parts.append(template[pos : m.start()])
        kind = m.lastgroup
        parts.append(TemplateToken(kind=cast(TokenKind, kind), name=m.group(kind)))
        pos = m.end()
    if pos < len(template):
        parts.append(template[pos:])
    return parts


def parse_template(template: str) -> tuple[TemplateToken, ...]:
    """Return the bracket tokens of *template* in left-to-right order.

    Examples::

        "/about"                  -> ()
        "/news/[articleId]"       -> (TemplateToken("param", "articleId"),)
        "/c/[[...slug]]"          -> (TemplateToken("optional_catch_all", "slug"),)
    """
    return tuple(part for part in _scan(template) if isinstance(part, TemplateToken))


class TemplateMatcher:
    """A compiled route template.

    Usage::

        matcher = compile_template("/news/[articleId]")
        matcher.match("/news/42")            # ("42",)
        matcher.matches_exactly("/news")     # False
    """

    __slots__ = ("_regex", "template", "tokens")

    def __init__(self, template: str) -> None:
        self.template = template
        pattern: list[str] = []
        tokens: list[TemplateToken] = []
        for part in _scan(template):
            if isinstance(part, str):
                pattern.append(re.escape(part))
                continue
            if part.kind == "optional_catch_all" and pattern and pattern[-1].endswith("/"):
                pattern[-1] = pattern[-1][:-1]
                pattern.append(_PATTERNS["optional_catch_all"])
            elif part.kind == "optional_catch_all":
                # No separator to fold in (template starts with the token)
                pattern.append(r"(.*)")
            else:
                pattern.append(_PATTERNS[part.kind])
            tokens.append(part)
        self.tokens = tuple(tokens)
        self._regex = re.compile("".join(pattern))

    def match(self, pathname: str) -> tuple[str | None, ...] | None:
        """Match the whole of *pathname*.

        Returns the captured values in token order, or ``None``. An
        optional catch-all that matched no segments captures ``None``.
        """
        m = self._regex.fullmatch(pathname)
        if m is None:
            return None
        return m.groups()

    def matches_exactly(self, pathname: str) -> bool:
        return self._regex.fullmatch(pathname) is not None

    def __repr__(self) -> str:
        return f"TemplateMatcher({self.template!r})"


@lru_cache(maxsize=1024)
def compile_template(template: str) -> TemplateMatcher:
    """Compile *template* into a matcher.

    Cached per template string. A matcher depends on nothing but the
    string, so sharing it across configurations cannot change results.
    """
    return TemplateMatcher(template)
