"""
Tests for derived post fields: excerpt, read time and tag normalization.

Run with: python -m pytest blog/tests/test_text.py -v
"""

import pytest

from blog.models import Post
from blog.text import compute_read_time, make_excerpt, normalize_tags, strip_markup


class TestExcerpt:

    def test_short_content_kept_whole(self):
        content = "x" * 50
        assert make_excerpt(content) == content

    def test_exactly_150_chars_has_no_ellipsis(self):
        content = "y" * 150
        assert make_excerpt(content) == content

    def test_long_content_truncated_with_ellipsis(self):
        content = "z" * 151
        excerpt = make_excerpt(content)
        assert excerpt == "z" * 150 + "..."
        assert len(excerpt) == 153

    def test_markup_stripped_before_cutting(self):
        content = "<p>Hello <b>world</b></p>" + "a" * 10
        assert make_excerpt(content) == "Hello world" + "a" * 10

    def test_strip_markup(self):
        assert strip_markup('<a href="/x">link</a> text') == "link text"


class TestReadTime:

    @pytest.mark.parametrize("words,minutes", [
        (1, 1),
        (200, 1),
        (201, 2),
        (300, 2),
        (1000, 5),
    ])
    def test_rounds_up_at_200_wpm(self, words, minutes):
        assert compute_read_time(" ".join(["word"] * words)) == minutes

    def test_whitespace_runs_count_once(self):
        assert compute_read_time("one   two\n\nthree\tfour") == 1


def test_normalize_tags():
    assert normalize_tags(["  Django ", "PYTHON", "web"]) == ["django", "python", "web"]


@pytest.mark.django_db
class TestPostSave:

    def test_blank_excerpt_derived_on_save(self, user):
        content = "Word " * 60
        post = Post.objects.create(author=user, title="Derived fields", content=content)
        assert post.excerpt == content[:150] + "..."
        assert post.read_time == 1

    def test_explicit_excerpt_kept(self, user):
        post = Post.objects.create(
            author=user, title="Own excerpt", content="c " * 40, excerpt="Hand written",
        )
        assert post.excerpt == "Hand written"

    def test_read_time_recomputed_when_content_changes(self, user):
        post = Post.objects.create(author=user, title="Growing post", content="w " * 50)
        assert post.read_time == 1

        post.content = "w " * 300
        post.save()
        post.refresh_from_db()
        assert post.read_time == 2

    def test_read_time_recomputed_with_update_fields(self, user):
        post = Post.objects.create(author=user, title="Growing post", content="w " * 50)
        post.content = "w " * 401
        post.save(update_fields=["content"])
        post.refresh_from_db()
        assert post.read_time == 3

    def test_tags_normalized_on_save(self, user):
        post = Post.objects.create(
            author=user, title="Tagged post", content="t " * 30, tags=[" Django", "API "],
        )
        assert post.tags == ["django", "api"]
