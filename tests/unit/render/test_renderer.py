"""
Tests for SiteRenderer and the bundled templates.
"""
import pytest
from datetime import datetime, timezone

from jinja2 import UndefinedError

from blogsite.dataclasses.blog import Blog, assemble
from blogsite.dataclasses.manifest import Manifest
from blogsite.render.renderer import SiteRenderer


@pytest.fixture
def blog(raw_post_factory):
    manifest = Manifest(title="Example Blog", index_title="Example Blog | Home")
    return assemble(
        manifest,
        [
            raw_post_factory(2024, 9, 3, "second.md", title="Second & last"),
            raw_post_factory(2024, 1, 15, "first.md", title="First"),
            raw_post_factory(2023, 12, 24, "holiday.md", title="Holiday"),
        ],
    )


class TestSiteRendererSetup:
    """Tests for SiteRenderer construction."""

    def test_rejects_both_sources(self, tmp_dir):
        with pytest.raises(ValueError):
            SiteRenderer(templates_dir=tmp_dir, templates={"a": "b"})

    def test_dict_templates(self):
        renderer = SiteRenderer(templates={"t.html.jinja2": "{{ title }}"})
        assert renderer.render("t.html.jinja2", {"title": "Hi"}) == "Hi"

    def test_filters_registered(self):
        renderer = SiteRenderer(templates={"t.html.jinja2": "{{ 9 | month_name }} {{ post_time | rfc3339 }}"})
        context = {"post_time": datetime(2024, 9, 4, tzinfo=timezone.utc)}
        assert renderer.render("t.html.jinja2", context) == "Sept. 2024-09-04T00:00:00+00:00"

    def test_html_autoescaped(self):
        renderer = SiteRenderer(templates={"t.html.jinja2": "{{ title }}"})
        assert renderer.render("t.html.jinja2", {"title": "<b>"}) == "&lt;b&gt;"

    def test_undefined_variable_raises(self):
        renderer = SiteRenderer(templates={"t.html.jinja2": "{{ missing }}"})
        with pytest.raises(UndefinedError):
            renderer.render("t.html.jinja2", {})

    def test_templates_dir(self, tmp_dir):
        (tmp_dir / "page.html.jinja2").write_text("custom {{ title }}", encoding="utf-8")
        renderer = SiteRenderer(templates_dir=tmp_dir)
        assert renderer.render("page.html.jinja2", {"title": "x"}) == "custom x"


class TestRenderToFile:
    """Tests for render_to_file change detection."""

    def test_writes_and_creates_parents(self, tmp_dir):
        renderer = SiteRenderer(templates={"t.html.jinja2": "{{ title }}"})
        path = tmp_dir / "a" / "b" / "page.html"

        assert renderer.render_to_file("t.html.jinja2", {"title": "x"}, path) is True
        assert path.read_text(encoding="utf-8") == "x"

    def test_unchanged_content_not_rewritten(self, tmp_dir):
        renderer = SiteRenderer(templates={"t.html.jinja2": "{{ title }}"})
        path = tmp_dir / "page.html"

        renderer.render_to_file("t.html.jinja2", {"title": "x"}, path)
        assert renderer.render_to_file("t.html.jinja2", {"title": "x"}, path) is False
        assert renderer.render_to_file("t.html.jinja2", {"title": "y"}, path) is True

    def test_undecodable_existing_file_overwritten(self, tmp_dir):
        renderer = SiteRenderer(templates={"t.html.jinja2": "{{ title }}"})
        path = tmp_dir / "page.html"
        path.write_bytes(b"\xff\xfe\x00")

        assert renderer.render_to_file("t.html.jinja2", {"title": "x"}, path) is True
        assert path.read_text(encoding="utf-8") == "x"


class TestBundledTemplates:
    """Tests for the packaged index, post and feed templates."""

    def test_index_year_headings(self, blog):
        html = SiteRenderer().render(
            "index.html.jinja2",
            {"title": blog.index_title, "blog": blog, "root": ""},
        )
        assert html.count("Posts in 2024") == 1
        assert html.count("Posts in 2023") == 1
        assert html.index("Posts in 2024") < html.index("Posts in 2023")
        assert "Sept. 3" in html
        assert 'href="2024/09/03/second.html"' in html
        assert "Second &amp; last" in html

    def test_index_empty_blog(self):
        blog = Blog(title="Empty", index_title="Empty | Home")
        html = SiteRenderer().render(
            "index.html.jinja2", {"title": blog.index_title, "blog": blog, "root": ""}
        )
        assert "No posts yet." in html
        assert "Posts in" not in html

    def test_post_page(self, blog):
        post = blog.posts[0]
        html = SiteRenderer().render(
            "post.html.jinja2",
            {"title": f"{post.title} | {blog.title}", "blog": blog, "post": post, "root": "../../../"},
        )
        assert "<p>Body</p>" in html
        assert 'href="../../../index.html"' in html
        assert 'href="../../../styles/app.css"' in html

    def test_feed_entries(self, blog):
        xml = SiteRenderer().render(
            "feed.xml.jinja2",
            {
                "blog": blog,
                "base_url": "https://example.com/",
                "feed_updated": datetime(2024, 10, 1, tzinfo=timezone.utc),
            },
        )
        assert xml.startswith('<?xml version="1.0" encoding="utf-8"?>')
        assert "<updated>2024-10-01T00:00:00+00:00</updated>" in xml
        assert xml.count("<entry>") == 3
        assert "https://example.com/2024/01/15/first.html" in xml
        assert "&lt;p&gt;Body&lt;/p&gt;" in xml
