#!/usr/bin/env python3
"""
Command line entry point for simple_crawler.

Usage:
  simple-crawler [OPTIONS] CONFIG

CONFIG is a TOML, YAML or JSON file with at least ``seed-url``,
``url-regex``, ``sleep-time`` and one of ``save-html`` / ``save-text``.

Options:
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Also write logs to this file
  --log-format FORMAT Format string for log records
  --report PATH       Save a JSON summary of the crawl
  --version, -v       Show the version

Exit status: 1 for usage or configuration errors, 0 otherwise (a seed URL
without a recognisable protocol or domain ends the run early with 0).

Example:
  simple-crawler --report crawl.json config.toml
"""
import sys
from pathlib import Path
from typing import Optional, Sequence

import click

from simple_crawler import __version__
from simple_crawler.config import load_config
from simple_crawler.engine import Engine
from simple_crawler.exceptions import ConfigurationError, SeedURLError
from simple_crawler.logger import DEFAULT_FORMAT, configure
from simple_crawler.report.json_report import render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str, code: int = 1):
    click.secho(message, fg='red', err=True)
    sys.exit(code)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='simple-crawler, version %(version)s')
@click.argument(
    'config_path',
    metavar='CONFIG',
    type=click.Path(dir_okay=False, path_type=Path),
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
    help='Also write logs to this file'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Format string for log records'
)
@click.option(
    '--report', '-r', 'report_path',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save a JSON summary of the crawl'
)
def cli(config_path, log_level, log_file, log_format, report_path):
    """Crawl breadth-first from the seed URL described in CONFIG."""
    configure(level=log_level, log_file=log_file, log_format=log_format)

    try:
        cfg = load_config(config_path)
    except FileNotFoundError as e:
        print_error(f'Config file not found: {e.filename}')
    except ConfigurationError as e:
        print_error(str(e))

    try:
        summary = Engine(cfg).run()
    except SeedURLError as e:
        click.secho(str(e), fg='yellow', err=True)
        return

    click.echo(
        f'Crawled {len(summary.pages)} urls from {summary.seed_url} '
        f'in {summary.elapsed:.2f} s'
    )

    if report_path:
        try:
            saved = render_json(summary, report_path)
            click.echo(f'JSON report: {saved}')
        except OSError as e:
            print_error(f'Could not save report: {e}')


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Console script entry point; usage errors exit with status 1."""
    try:
        code = cli.main(args=argv, prog_name='simple-crawler', standalone_mode=False)
    except click.UsageError as e:
        e.show()
        sys.exit(1)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except click.Abort:
        click.echo('Aborted!', err=True)
        sys.exit(1)
    sys.exit(code or 0)


if __name__ == "__main__":
    main()
