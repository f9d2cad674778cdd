# === FILE: krawl/cli.py ===
#!/usr/bin/env python3
"""
Command-line entry point for krawl.

Commands:
  crawl     Crawl a site from a seed URL and print/save the collected pages
  config    Show the effective crawl configuration

Global options:
  --config PATH       YAML/JSON file with crawl settings
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stderr only if omitted)
  --log-format FORMAT Logging format string

crawl options:
  --pattern REGEX     Only follow links matching REGEX (repeatable)
  --depth INT         Link generations to follow (default 3)
  --timeout SEC       Deadline for the whole crawl
  --page-timeout SEC  Deadline for a single page
  --concurrency INT   Pages rendered in parallel
  --renderer NAME     http or browser
  --json PATH         Save a JSON report
  --html PATH         Save an HTML report
  --template DIR      Folder with a custom report.html.j2
  --pretty            Indent JSON output

Example:
  krawl crawl https://example.com --pattern '/blog/.*' --depth 2 --json pages.json
"""
import json
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from krawl import __version__
from krawl.config import build_request, read_config
from krawl.engine import run
from krawl.errors import ConfigError
from krawl.logger import DEFAULT_FORMAT, configure
from krawl.report.html_report import render_html
from krawl.report.json_report import pages_to_dicts, render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='krawl, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='YAML or JSON file with crawl settings.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file (stderr only if omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Logging format string'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """krawl: crawl a site and collect the text of its pages."""
    configure(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format,
        stream=sys.stderr,
    )
    config_data = {}
    if config_path is not None:
        try:
            config_data = read_config(config_path)
        except (OSError, ValueError, TypeError) as e:
            print_error(f'Failed to load configuration: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config_data'] = config_data


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.argument('seed_url', required=False)
@click.option('--pattern', '-p', 'patterns', multiple=True, help='Only follow links matching this regex (repeatable)')
@click.option('--depth', '-d', type=int, default=None, help='Link generations to follow')
@click.option('--timeout', type=float, default=None, help='Deadline for the whole crawl (seconds)')
@click.option('--page-timeout', 'page_timeout', type=float, default=None, help='Deadline for one page (seconds)')
@click.option('--concurrency', type=int, default=None, help='Pages rendered in parallel')
@click.option('--renderer', type=click.Choice(['http', 'browser']), default=None, help='Page renderer backend')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save a JSON report to this file'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save an HTML report to this file'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Folder with a custom report.html.j2'
)
@click.option('--pretty', is_flag=True, help='Indent JSON output by 2')
@click.pass_context
def crawl(ctx, seed_url, patterns, depth, timeout, page_timeout, concurrency, renderer,
          json_output, html_output, template_dir, pretty):
    """Crawl SEED_URL (or the seed_url from --config) and report the collected pages."""
    try:
        request = build_request(
            ctx.obj['config_data'],
            seed_url=seed_url,
            path_patterns=list(patterns) or None,
            max_depth=depth,
            timeout=timeout,
            page_timeout=page_timeout,
            concurrency=concurrency,
            renderer=renderer,
        )
    except ValidationError as e:
        print_error(f'Invalid crawl settings: {e}')

    try:
        result = run(request)
    except ConfigError as e:
        print_error(f'Configuration error: {e}')

    if not json_output and not html_output:
        indent = 2 if pretty else None
        click.echo(json.dumps(pages_to_dicts(result.pages), ensure_ascii=False, indent=indent))

    if json_output:
        try:
            saved_json = render_json(result.pages, json_output, pretty=pretty)
            click.echo(f'JSON report: {saved_json}')
        except OSError as e:
            print_error(f'Failed to save JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(result.pages, html_output, template_dir, seed_url=request.seed_url)
            click.echo(f'HTML report: {saved_html}')
        except OSError as e:
            print_error(f'Failed to save HTML: {e}')

    if result.timed_out:
        print_error(f'Crawl did not finish: {result.error} (partial results kept)')
    if result.error is not None:
        print_error(f'Crawl failed: {result.error}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.argument('seed_url', required=False)
@click.pass_context
def show_config(ctx, seed_url):
    """Show the effective crawl configuration as JSON."""
    try:
        request = build_request(ctx.obj['config_data'], seed_url=seed_url)
    except ValidationError as e:
        print_error(f'Invalid crawl settings: {e}')
    click.echo(request.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
