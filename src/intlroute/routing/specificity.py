"""Specificity ordering for route templates.

More literal templates are tried before generic ones so that
``/news/[articleId]`` never shadows ``/news/latest``.
"""

from collections.abc import Iterable
from functools import cmp_to_key


def _is_dynamic(segment: str) -> bool:
    return "[" in segment


def _is_catch_all(segment: str) -> bool:
    return "[..." in segment


def _is_optional_catch_all(segment: str) -> bool:
    return "[[..." in segment


def compare_templates(a: str, b: str) -> int:
    """Segment-wise comparison; negative when *a* is more specific.

    At each position: a template that has run out of segments wins, then
    static beats dynamic, then a single-segment param beats a catch-all,
    then a required catch-all beats an optional one. Templates that never
    differ on these rules compare equal.
    """
    segments_a = a.split("/")
    segments_b = b.split("/")

    for i in range(max(len(segments_a), len(segments_b))):
        seg_a = segments_a[i] if i < len(segments_a) else ""
        seg_b = segments_b[i] if i < len(segments_b) else ""

        if not seg_a and seg_b:
            return -1
        if seg_a and not seg_b:
            return 1
        if not seg_a and not seg_b:
            continue

        for rule in (_is_dynamic, _is_catch_all, _is_optional_catch_all):
            if not rule(seg_a) and rule(seg_b):
                return -1
            if rule(seg_a) and not rule(seg_b):
                return 1

    return 0


def sort_templates(templates: Iterable[str]) -> list[str]:
    """Return *templates* ordered most specific first.

    ``sorted`` is stable, so templates that compare equal keep their
    configured order.
    """
    return sorted(templates, key=cmp_to_key(compare_templates))
