"""Tests for intlroute.routing.template: template tokens and matchers."""

import pytest

from intlroute.routing.template import TemplateMatcher, TemplateToken, compile_template, parse_template


class TestParseTemplate:
    def test_static(self) -> None:
        assert parse_template("/about") == ()

    def test_param(self) -> None:
        assert parse_template("/news/[articleId]") == (TemplateToken("param", "articleId"),)

    def test_catch_all(self) -> None:
        assert parse_template("/docs/[...path]") == (TemplateToken("catch_all", "path"),)

    def test_optional_catch_all(self) -> None:
        tokens = parse_template("/categories/[[...slug]]")
        assert tokens == (TemplateToken("optional_catch_all", "slug"),)

    def test_left_to_right_order(self) -> None:
        tokens = parse_template("/users/[userId]/posts/[postId]/[...rest]")
        assert [t.name for t in tokens] == ["userId", "postId", "rest"]
        assert [t.kind for t in tokens] == ["param", "param", "catch_all"]

    def test_placeholder(self) -> None:
        assert TemplateToken("param", "id").placeholder == "[id]"
        assert TemplateToken("catch_all", "path").placeholder == "[...path]"
        assert TemplateToken("optional_catch_all", "slug").placeholder == "[...slug]"

    def test_token_frozen(self) -> None:
        token = TemplateToken("param", "id")
        with pytest.raises(AttributeError):
            token.name = "other"  # type: ignore[misc]


class TestTemplateMatcherLiterals:
    def test_exact(self) -> None:
        matcher = compile_template("/about")
        assert matcher.match("/about") == ()
        assert matcher.matches_exactly("/about") is True

    def test_anchored(self) -> None:
        matcher = compile_template("/about")
        assert matcher.match("/about/team") is None
        assert matcher.match("/en/about") is None

    def test_root(self) -> None:
        matcher = compile_template("/")
        assert matcher.matches_exactly("/") is True
        assert matcher.matches_exactly("/about") is False

    def test_regex_metacharacters_are_literal(self) -> None:
        matcher = compile_template("/a.b")
        assert matcher.matches_exactly("/a.b") is True
        assert matcher.matches_exactly("/axb") is False


class TestTemplateMatcherParams:
    def test_single_segment(self) -> None:
        assert compile_template("/news/[articleId]").match("/news/42") == ("42",)

    def test_param_rejects_slash(self) -> None:
        assert compile_template("/news/[articleId]").match("/news/42/comments") is None

    def test_param_rejects_empty(self) -> None:
        assert compile_template("/news/[articleId]").match("/news/") is None

    def test_multiple_params(self) -> None:
        matcher = compile_template("/users/[userId]/posts/[postId]")
        assert matcher.match("/users/7/posts/99") == ("7", "99")


class TestTemplateMatcherCatchAll:
    def test_catch_all_spans_segments(self) -> None:
        assert compile_template("/docs/[...path]").match("/docs/a/b/c") == ("a/b/c",)

    def test_catch_all_requires_one_segment(self) -> None:
        assert compile_template("/docs/[...path]").match("/docs") is None

    def test_optional_catch_all_zero_segments(self) -> None:
        matcher = compile_template("/categories/[[...slug]]")
        assert matcher.match("/categories") == (None,)

    def test_optional_catch_all_many_segments(self) -> None:
        matcher = compile_template("/categories/[[...slug]]")
        assert matcher.match("/categories/a/b") == ("a/b",)

    def test_optional_catch_all_does_not_match_prefix_of_word(self) -> None:
        matcher = compile_template("/categories/[[...slug]]")
        assert matcher.matches_exactly("/categoriesx") is False


class TestCompileTemplate:
    def test_returns_matcher(self) -> None:
        assert isinstance(compile_template("/about"), TemplateMatcher)

    def test_cached_per_template(self) -> None:
        assert compile_template("/cached/[id]") is compile_template("/cached/[id]")

    def test_tokens_exposed(self) -> None:
        matcher = compile_template("/news/[articleId]")
        assert matcher.tokens == (TemplateToken("param", "articleId"),)
        assert matcher.template == "/news/[articleId]"

    def test_repr(self) -> None:
        assert repr(compile_template("/about")) == "TemplateMatcher('/about')"


class TestOptionalCatchAllCompilation:
    def test_token_kind_is_optional_catch_all(self) -> None:
        (token,) = parse_template("/categories/[[...slug]]")
        assert token.kind == "optional_catch_all"
        assert token.name == "slug"

    def test_compiles_alongside_other_tokens(self) -> None:
        matcher = compile_template("/shop/[store]/[[...path]]")
        assert [t.kind for t in matcher.tokens] == ["param", "optional_catch_all"]
        assert matcher.match("/shop/berlin") == ("berlin", None)
        assert matcher.match("/shop/berlin/shoes/red") == ("berlin", "shoes/red")

    def test_template_starting_with_optional_catch_all(self) -> None:
        matcher = compile_template("[[...rest]]")
        assert matcher.match("a/b") == ("a/b",)
