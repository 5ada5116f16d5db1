"""Tests for intlroute.routing.specificity: template ordering."""

from intlroute.routing.specificity import compare_templates, sort_templates


class TestCompareTemplates:
    def test_static_before_dynamic(self) -> None:
        assert compare_templates("/news/latest", "/news/[id]") < 0
        assert compare_templates("/news/[id]", "/news/latest") > 0

    def test_shorter_before_longer(self) -> None:
        assert compare_templates("/news", "/news/latest") < 0

    def test_param_before_catch_all(self) -> None:
        assert compare_templates("/docs/[id]", "/docs/[...path]") < 0

    def test_catch_all_before_optional_catch_all(self) -> None:
        assert compare_templates("/docs/[...path]", "/docs/[[...path]]") < 0

    def test_static_templates_equal(self) -> None:
        assert compare_templates("/about", "/contact") == 0


class TestSortTemplates:
    def test_specific_first(self) -> None:
        result = sort_templates(["/[...rest]", "/news/[id]", "/news/latest", "/"])
        assert result == ["/", "/news/latest", "/news/[id]", "/[...rest]"]

    def test_stable_for_ties(self) -> None:
        assert sort_templates(["/contact", "/about", "/team"]) == ["/contact", "/about", "/team"]

    def test_does_not_mutate_input(self) -> None:
        templates = ["/news/[id]", "/news/latest"]
        sort_templates(templates)
        assert templates == ["/news/[id]", "/news/latest"]

    def test_accepts_mapping_keys(self) -> None:
        table = {"/[slug]": "/[slug]", "/about": "/about"}
        assert sort_templates(table) == ["/about", "/[slug]"]
