#!/usr/bin/env python3
"""
Точка входа для запуска LinksFinder через командную строку.

Команды:
  crawl URL   Обойти все ссылки, начинающиеся с URL, и вывести их
  config      Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stdout, если не указан)
  --log-format FORMAT Формат логирования

Команда crawl опции:
  --workers N         Число потоков (default 10)
  --poll-interval SEC Интервал отчёта о прогрессе (default 5)
  --timeout SEC       Таймаут на один запрос
  --user-agent UA     Заголовок User-Agent
  --json PATH         Сохранить JSON-отчёт в файл
  --pretty            Преформатировать JSON-отчёт (отступ 2)

Пример:
  links-finder crawl https://example.com/docs --workers 20 --json report.json --pretty
"""
import sys
import json
from pathlib import Path

import click
from pydantic import ValidationError

from links_finder import __version__
from links_finder.config import load_config, read_config_file
from links_finder.crawler.fetcher import is_valid_url
from links_finder.engine import run_crawl
from links_finder.logger import init_logging, configure
from links_finder.report import print_report, render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='LinksFinder, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stdout, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=None,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд LinksFinder CLI."""
    if log_format:
        configure(level=log_level, log_file=log_file, log_format=log_format)
    else:
        init_logging(level=log_level, log_file=log_file)
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.argument('start_url', required=False)
@click.option('--workers', '-w', type=click.IntRange(min=1), default=None, help='Число потоков в пуле')
@click.option('--poll-interval', 'poll_interval', type=float, default=None, help='Интервал отчёта о прогрессе (секунд)')
@click.option('--timeout', type=float, default=None, help='Таймаут на один запрос (секунд)')
@click.option('--user-agent', 'user_agent', default=None, help='Заголовок User-Agent')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option('--pretty', is_flag=True, help='Преформатировать JSON-отчёт (отступ 2)')
@click.pass_context
def crawl(ctx, start_url, workers, poll_interval, timeout, user_agent, json_output, pretty):
    """Обойти сайт и вывести найденные ссылки."""
    try:
        cfg = load_config(
            ctx.obj['config_path'],
            start_url=start_url,
            workers=workers,
            poll_interval=poll_interval,
            timeout=timeout,
            user_agent=user_agent,
        )
    except ValidationError as e:
        print_error(f'Ошибка в конфигурации: {e}')
    except (OSError, ValueError, TypeError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    if not is_valid_url(cfg.start_url):
        print_error(f'Некорректный стартовый URL: {cfg.start_url}')

    try:
        report = run_crawl(cfg)
    except Exception as e:
        print_error(f'Ошибка при обходе: {e}')

    print_report(report)

    if json_output:
        try:
            saved_json = render_json(report, json_output, pretty=pretty)
            click.echo(f'JSON report: {saved_json}', err=True)
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать конфигурацию из файла в JSON (без проверки)."""
    try:
        raw = read_config_file(ctx.obj['config_path'])
    except (OSError, ValueError, TypeError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    click.echo(json.dumps(raw, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    cli()
