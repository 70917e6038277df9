#!/usr/bin/env python3
"""
blogsite CLI
------------

Command-line interface for building a blog.

Commands:
    - build: Render posts/ into site/ (default when no command is given)
    - list: Parse and order posts without writing anything

Usage:
    # Build with all defaults (posts/ → site/)
    blogsite

    # Explicit directories
    blogsite build --posts posts --output site --static static

    # Check every post parses and see the display order
    blogsite list
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from blogsite.builders.sitebuilder import SiteBuilder
from blogsite.core.cli import setup_logger
from blogsite.core.logging_manager import BlogLogger, handle_cli_error
from blogsite.core.paths import LOG_DIR, POSTS_DIR, SITE_DIR, STATIC_DIR
from blogsite.pipeline.loader import load_blog
from blogsite.render.filters import rfc3339
from blogsite.render.renderer import SiteRenderer


@click.group(invoke_without_command=True)
@click.option(
    "--log-dir",
    type=click.Path(),
    default=str(LOG_DIR),
    help="Directory for log files",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, log_dir: str, verbose: bool) -> None:
    """blogsite - Static blog generator"""
    ctx.ensure_object(dict)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), "build")

    if ctx.invoked_subcommand is None:
        ctx.invoke(build)


@cli.command()
@click.option(
    "-i",
    "--posts",
    type=click.Path(),
    default=str(POSTS_DIR),
    show_default=True,
    help="Directory with blog.yml and YYYY-MM-DD-<slug>.md posts",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(),
    default=str(SITE_DIR),
    show_default=True,
    help="Output directory for the generated site",
)
@click.option(
    "--static",
    type=click.Path(),
    default=str(STATIC_DIR),
    show_default=True,
    help="Directory with fonts/, images/, styles/ and scripts/",
)
@click.option(
    "--templates",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Directory with custom templates (defaults to the bundled ones)",
)
@click.option(
    "--base-url",
    default="",
    help="Absolute site URL used for links in feed.xml",
)
@click.pass_context
def build(
    ctx: click.Context,
    posts: str,
    output: str,
    static: str,
    templates: Optional[str],
    base_url: str,
) -> None:
    """
    Build the site.

    Parses every post, orders them, and writes the index page, one page
    per post, the Atom feed and the static assets.
    """
    logger: BlogLogger = ctx.obj["logger"]

    try:
        blog = load_blog(Path(posts), logger)

        renderer = SiteRenderer(templates_dir=Path(templates) if templates else None)
        builder = SiteBuilder(
            blog=blog,
            output_dir=Path(output),
            renderer=renderer,
            static_dir=Path(static),
            base_url=base_url,
            logger=logger,
        )
        stats = builder.build()

        click.echo(f"{blog.title}: {stats.index_url}")
        if stats.latest_post_url:
            click.echo(f"└─ Latest post: {stats.latest_post_url}\n")
        click.echo(f"✅ Build complete: {stats.summary()}")

    except Exception as e:
        handle_cli_error(
            ctx,
            e,
            "build",
            additional_context={"posts": posts, "output": output},
        )


@cli.command(name="list")
@click.option(
    "-i",
    "--posts",
    type=click.Path(),
    default=str(POSTS_DIR),
    show_default=True,
    help="Directory with blog.yml and YYYY-MM-DD-<slug>.md posts",
)
@click.pass_context
def list_posts(ctx: click.Context, posts: str) -> None:
    """
    List posts in display order without writing anything.

    Every post is parsed and validated, so this doubles as a check that
    the blog would build.
    """
    logger: BlogLogger = ctx.obj["logger"]

    try:
        blog = load_blog(Path(posts), logger)
    except Exception as e:
        handle_cli_error(ctx, e, "list", additional_context={"posts": posts})
        return

    click.echo(f"{blog.title} ({len(blog.posts)} posts)")
    for post in blog.posts:
        if post.show_year:
            click.echo(f"\n{post.year}")
        click.echo(f"  {rfc3339(post.updated)}  {post.url}  {post.title}")


if __name__ == "__main__":
    cli(obj={})
