"""Command line interface for linktags.

Resolves a single href the way the renderer would, for checking page
indexes and routing settings.
"""

from __future__ import annotations

import json

import click

from linktags.config.logging import configure_logging
from linktags.config.settings import Settings, get_settings
from linktags.container import create_resolver
from linktags.domain.entities import LinkTag
from linktags.exceptions import ConfigurationError, PageLookupError


@click.group()
@click.option("--log-level", default=None, help="Override LINKTAGS_LOG_LEVEL")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Link-tag resolution tools."""
    settings = get_settings()
    configure_logging(log_level or settings.log_level, json=settings.log_json)
    ctx.obj = settings


@cli.command("resolve")
@click.argument("href")
@click.option("--text", default="", help="Link text")
@click.option("--target", default="", help="Link target attribute")
@click.option("--pages", "pages", type=click.Path(dir_okay=False), default=None,
              help="JSON page index (overrides LINKTAGS_PAGE_INDEX_PATH)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def resolve(
    settings: Settings,
    href: str,
    text: str,
    target: str,
    pages: str | None,
    as_json: bool,
) -> None:
    """Resolve HREF and print the rewritten link."""
    if pages is not None:
        settings = settings.model_copy(update={"page_index_path": pages})

    try:
        resolver = create_resolver(settings)
        tag = LinkTag.from_href(href, text=text, target=target)
        kind = resolver.classify(tag)
        resolved = resolver.parse(tag)
    except (ConfigurationError, PageLookupError) as e:
        click.echo(f"Error: {e.message}", err=True)
        raise SystemExit(1)

    if as_json:
        data = resolved.model_dump(mode="json")
        data["kind"] = kind.value
        click.echo(json.dumps(data, indent=2))
        return

    click.echo(f"Kind:      {kind.value}")
    click.echo(f"Href:      {resolved.href}")
    click.echo(f"CSS class: {resolved.css_class.value or '(none)'}")


def main() -> None:
    """Entry point for the linktags script."""
    cli()


if __name__ == "__main__":
    main()
