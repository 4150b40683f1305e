"""
Tests for route rule matching.
"""

from visitorlog.utils.patterns import PathMatcher


class TestPathMatcher:
    """Test which paths reach the visitor hook."""

    def test_default_matches_everything(self):
        matcher = PathMatcher()
        for path in ["/", "/apply", "/blog/2025/hello", "/health"]:
            assert matcher.matches(path)

    def test_wildcard_prefix(self):
        matcher = PathMatcher(["/blog/*"])
        assert matcher.matches("/blog/post")
        assert matcher.matches("/blog/2025/post")
        assert not matcher.matches("/about")
        assert not matcher.matches("/blogroll")

    def test_exact_paths(self):
        matcher = PathMatcher(["/", "/apply"])
        assert matcher.matches("/")
        assert matcher.matches("/apply")
        assert not matcher.matches("/apply/now")
        assert not matcher.matches("/other")

    def test_regex_characters_are_literal(self):
        matcher = PathMatcher(["/file.html"])
        assert matcher.matches("/file.html")
        assert not matcher.matches("/fileXhtml")

    def test_empty_list_falls_back_to_default(self):
        assert PathMatcher([]).patterns == ["/*"]
