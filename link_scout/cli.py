#!/usr/bin/env python3
"""
Точка входа для запуска краулера LinkScout через командную строку.

Команды:
  crawl     Обойти сайт от стартового URL и вывести/сохранить отчёты
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (необязательно)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)
  --log-format FORMAT Формат логирования (e.g. "%(asctime)s %(levelname)s %(message)s")

Команда crawl опции:
  SEED                  Стартовый URL (перекрывает seed_url из конфига)
  --depth N             Бюджет глубины (перекрывает max_depth)
  --timeout SEC         Таймаут одного запроса
  --max-concurrency N   Ограничить число одновременных загрузок
  --crawl-timeout SEC   Таймаут всего обхода (секунд)
  --json PATH           Сохранить JSON-отчёт в файл
  --html PATH           Сохранить HTML-отчёт в файл
  --template DIR        Папка с Jinja2-шаблонами
  --format text|json    Формат вывода в stdout
  --pretty              Преформатировать JSON-вывод (отступ 2)

Дополнительно:
  --version, -v       Показать версию LinkScout

Пример:
  link_scout crawl https://golang.org/ --depth 3 --json report.json
"""
import asyncio
import json
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from link_scout import __version__
from link_scout.config import CrawlerConfig, load_config
from link_scout.engine import run_crawl
from link_scout.logger import init_logging, logger
from link_scout.report import format_registry, format_site, site_to_dict
from link_scout.report.html_report import render_html
from link_scout.report.json_report import render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='LinkScout, version %(version)s')
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
    help='Путь к файлу логов (stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд LinkScout CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    cfg = None
    if config_path is not None:
        try:
            cfg = load_config(config_path)
        except Exception as e:
            print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


def _effective_config(base, overrides: dict) -> CrawlerConfig:
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if base is None:
        if 'seed_url' not in overrides:
            print_error('Не указан стартовый URL: передайте SEED или --config')
        return CrawlerConfig(**overrides)
    return CrawlerConfig(**{**base.model_dump(), **overrides})


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.argument('seed', required=False)
@click.option('--depth', '-d', 'depth', type=int, default=None, help='Бюджет глубины (override max_depth)')
@click.option('--timeout', 'timeout', type=float, default=None, help='Таймаут одного запроса (секунд)')
@click.option(
    '--max-concurrency', 'max_concurrency',
    type=int, default=None,
    help='Макс. число одновременных загрузок (без ограничения, если не указано)'
)
@click.option(
    '--crawl-timeout', 'crawl_timeout',
    type=float,
    default=None,
    help='Таймаут всего обхода (секунд)'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблонами (по умолчанию встроенный шаблон)'
)
@click.option(
    '--format', 'output_format',
    default='text', show_default=True,
    type=click.Choice(['text', 'json']),
    help='Формат вывода в stdout'
)
@click.option(
    '--pretty', is_flag=True,
    help='Преформатировать JSON-вывод (отступ 2)'
)
@click.pass_context
def crawl(ctx, seed, depth, timeout, max_concurrency, crawl_timeout,
          json_output, html_output, template_dir, output_format, pretty):
    """Обойти сайт и сгенерировать отчёты."""
    try:
        cfg = _effective_config(ctx.obj['config'], {
            'seed_url': seed,
            'max_depth': depth,
            'timeout': timeout,
            'max_concurrency': max_concurrency,
        })
    except ValidationError as e:
        print_error(f'Ошибка конфигурации: {e}')

    logger.info('Starting crawl: %s (depth %d)', cfg.seed_url, cfg.max_depth)
    try:
        site = run_crawl(cfg, crawl_timeout)
    except asyncio.TimeoutError:
        print_error(f'Обход не завершён за {crawl_timeout} секунд')
    except Exception as e:
        print_error(f'Ошибка при обходе: {e}')

    # Если не сохраняем в файл — печатаем в stdout
    if not json_output and not html_output:
        if output_format == 'json':
            indent = 2 if pretty else None
            click.echo(json.dumps(site_to_dict(site), ensure_ascii=False, indent=indent))
        else:
            click.echo(format_site(site))
            click.echo(format_registry(site.visited.snapshot()), nl=False)
        return

    if json_output:
        try:
            saved_json = render_json(site, json_output)
            click.echo(f'JSON report: {saved_json}')
        except Exception as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(site, template_dir, html_output)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    if cfg is None:
        print_error('Конфигурация не задана: используйте --config')
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
