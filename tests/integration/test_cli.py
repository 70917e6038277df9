#!/usr/bin/env python3
"""
Integration tests for the blogsite CLI.

Drives ``build`` and ``list`` through Click's CliRunner against
temporary blog directories.
"""
import pytest
from click.testing import CliRunner

from blogsite.pipeline.cli import cli


@pytest.fixture
def runner():
    """Create Click test runner."""
    return CliRunner()


@pytest.fixture
def blog_dirs(tmp_dir, posts_dir):
    """Posts, output, static and log directories for one blog."""
    posts = posts_dir({
        "2021-05-05-a.md": "First of May",
        "2021-05-05-b.md": "Second of May",
        "2020-01-01-c.md": "New Year",
    })
    static = tmp_dir / "static"
    (static / "styles").mkdir(parents=True)
    (static / "styles" / "app.css").write_text("body {}", encoding="utf-8")
    return {
        "posts": posts,
        "output": tmp_dir / "site",
        "static": static,
        "logs": tmp_dir / "logs",
    }


def _build_args(dirs):
    return [
        "--log-dir", str(dirs["logs"]),
        "build",
        "--posts", str(dirs["posts"]),
        "--output", str(dirs["output"]),
        "--static", str(dirs["static"]),
    ]


class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_cli_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Static blog generator" in result.output

    def test_build_help(self, runner):
        result = runner.invoke(cli, ["build", "--help"])
        assert result.exit_code == 0
        assert "--posts" in result.output
        assert "--base-url" in result.output

    def test_list_help(self, runner):
        result = runner.invoke(cli, ["list", "--help"])
        assert result.exit_code == 0


class TestBuildCommand:
    """Test the build command end to end."""

    def test_build_site(self, runner, blog_dirs):
        result = runner.invoke(cli, _build_args(blog_dirs))

        assert result.exit_code == 0, result.output
        output = blog_dirs["output"]
        assert (output / "index.html").is_file()
        assert (output / "2021" / "05" / "05" / "b.html").is_file()
        assert (output / "styles" / "app.css").is_file()
        assert "Example Blog: file://" in result.output
        assert "└─ Latest post:" in result.output
        assert "2021/05/05/b.html" in result.output
        assert "✅ Build complete" in result.output

    def test_build_writes_logs(self, runner, blog_dirs):
        runner.invoke(cli, _build_args(blog_dirs))
        assert (blog_dirs["logs"] / "operations" / "build.log").exists()

    def test_default_command_is_build(self, runner, blog_dirs, monkeypatch):
        """Running without a subcommand builds posts/ into site/."""
        monkeypatch.chdir(blog_dirs["posts"].parent)

        result = runner.invoke(cli, [])

        assert result.exit_code == 0, result.output
        assert (blog_dirs["posts"].parent / "site" / "index.html").is_file()
        assert (blog_dirs["posts"].parent / "logs" / "operations").is_dir()

    def test_custom_templates(self, runner, blog_dirs, tmp_dir):
        templates = tmp_dir / "templates"
        templates.mkdir()
        (templates / "index.html.jinja2").write_text(
            "{% for post in blog.posts %}{{ post.title }};{% endfor %}", encoding="utf-8"
        )
        (templates / "post.html.jinja2").write_text("{{ post.title }}", encoding="utf-8")
        (templates / "feed.xml.jinja2").write_text("<feed/>", encoding="utf-8")

        result = runner.invoke(cli, _build_args(blog_dirs) + ["--templates", str(templates)])

        assert result.exit_code == 0, result.output
        index = (blog_dirs["output"] / "index.html").read_text(encoding="utf-8")
        assert index == "Second of May;First of May;New Year;"

    def test_bad_post_fails_build(self, runner, blog_dirs):
        (blog_dirs["posts"] / "2022-02-02-broken.md").write_text(
            "---\ntitle: Broken\nauthor: A\n", encoding="utf-8"
        )

        result = runner.invoke(cli, _build_args(blog_dirs))

        assert result.exit_code == 1
        assert "HeaderNotTerminatedError" in result.output
        assert "2022-02-02-broken.md" in result.output
        assert not (blog_dirs["output"] / "index.html").exists()

    def test_missing_manifest_fails_build(self, runner, blog_dirs):
        (blog_dirs["posts"] / "blog.yml").unlink()

        result = runner.invoke(cli, _build_args(blog_dirs))

        assert result.exit_code == 1
        assert "SourceReadError" in result.output


class TestListCommand:
    """Test the list command."""

    def test_list_order(self, runner, blog_dirs):
        result = runner.invoke(
            cli, ["--log-dir", str(blog_dirs["logs"]), "list", "--posts", str(blog_dirs["posts"])]
        )

        assert result.exit_code == 0, result.output
        lines = [line for line in result.output.splitlines() if line.strip()]
        assert lines[0] == "Example Blog (3 posts)"
        assert lines[1] == "2021"
        assert lines[2] == "  2021-05-05T00:00:00+00:00  2021/05/05/b.html  Second of May"
        assert lines[3] == "  2021-05-05T00:00:01+00:00  2021/05/05/a.html  First of May"
        assert lines[4] == "2020"
        assert lines[5] == "  2020-01-01T00:00:00+00:00  2020/01/01/c.html  New Year"

    def test_list_writes_no_site(self, runner, blog_dirs):
        runner.invoke(
            cli, ["--log-dir", str(blog_dirs["logs"]), "list", "--posts", str(blog_dirs["posts"])]
        )
        assert not blog_dirs["output"].exists()

    def test_list_reports_bad_header(self, runner, blog_dirs):
        (blog_dirs["posts"] / "2022-02-02-draft.md").write_text(
            "---\ntitle: T\nauthor: A\ndraft: true\n---\n\nBody\n", encoding="utf-8"
        )

        result = runner.invoke(
            cli, ["--log-dir", str(blog_dirs["logs"]), "list", "--posts", str(blog_dirs["posts"])]
        )

        assert result.exit_code == 1
        assert "draft" in result.output
