# === FILE: gif_scout/cli.py ===
#!/usr/bin/env python3
"""
Точка входа GifScout для командной строки.

Команды:
  crawl URL   Обойти сайт от URL, собрать ссылки на .gif и (опционально) скачать их
  config      Показать итоговую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (только stderr, если не указан)
  --log-format FORMAT Формат логирования

Команда crawl опции:
  --depth INT             Глубина перехода по ссылкам (0 — только стартовая страница)
  --[no-]include-subdomains  Разрешить/запретить поддомены базового домена
  --max-pages INT         Лимит загружаемых страниц
  --download DIR          Скачать найденные GIF в DIR/gifs/
  --preserve-path         Сохранять путь из URL при скачивании
  --json PATH             Сохранить JSON-отчёт в файл
  --pretty                Преформатировать JSON-вывод (отступ 2)
  --scan-timeout SEC      Таймаут всего обхода (секунд)

Пример:
  gif_scout crawl https://example.com --depth 2 --max-pages 50 --download ./out
"""
import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Dict

import click
from click.core import ParameterSource
from pydantic import ValidationError

from gif_scout import __version__
from gif_scout.config import CrawlConfig, DownloadConfig, ScoutConfig, load_config
from gif_scout.crawler.crawler import StartPageError
from gif_scout.logger import init_logging
from gif_scout.report.json_report import render_json
from gif_scout.scanner import start_scan

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def _override(cfg: ScoutConfig, crawl: Dict[str, Any], download: Dict[str, Any]) -> ScoutConfig:
    """Новая проверенная конфигурация с параметрами CLI поверх файла."""
    crawl = {k: v for k, v in crawl.items() if v is not None}
    download = {k: v for k, v in download.items() if v is not None}
    return ScoutConfig(
        crawl=CrawlConfig(**{**cfg.crawl.model_dump(), **crawl}),
        download=DownloadConfig(**{**cfg.download.model_dump(), **download}),
    )


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='GifScout, version %(version)s')
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
    help='Путь к файлу логов (только stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд GifScout CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@click.option('--depth', '-d', type=int, default=None, help='Глубина перехода по ссылкам')
@click.option(
    '--include-subdomains/--no-include-subdomains', 'include_subdomains',
    default=None,
    help='Разрешить или запретить поддомены базового домена (по умолчанию из конфига)'
)
@click.option('--max-pages', '-m', 'max_pages', type=int, default=None, help='Лимит загружаемых страниц')
@click.option(
    '--download', 'download_dir',
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help='Скачать найденные GIF в эту папку'
)
@click.option('--preserve-path', is_flag=True, help='Сохранять путь из URL при скачивании')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option('--pretty', is_flag=True, help='Преформатировать JSON-вывод (отступ 2)')
@click.option('--scan-timeout', 'scan_timeout', type=float, default=None, help='Таймаут всего обхода (секунд)')
@click.pass_context
def crawl_command(ctx, url, depth, include_subdomains, max_pages, download_dir, preserve_path,
                  json_output, pretty, scan_timeout):
    """Обойти сайт от URL и собрать ссылки на GIF."""
    if ctx.get_parameter_source('include_subdomains') is not ParameterSource.COMMANDLINE:
        include_subdomains = None
    try:
        cfg = _override(
            ctx.obj['config'],
            crawl={'depth': depth, 'include_subdomains': include_subdomains, 'max_pages': max_pages},
            download={'output_dir': download_dir, 'preserve_path': preserve_path or None},
        )
    except ValidationError as e:
        print_error(f'Некорректные параметры: {e}')

    coro = start_scan(cfg, url, download=download_dir is not None)
    try:
        if scan_timeout:
            report = asyncio.run(asyncio.wait_for(coro, timeout=scan_timeout))
        else:
            report = asyncio.run(coro)
    except asyncio.TimeoutError:
        print_error(f'Обход не завершён за {scan_timeout} секунд')
    except StartPageError as e:
        print_error(f'Стартовая страница недоступна: {e}')
    except ValueError as e:
        print_error(f'Ошибка при обходе: {e}')

    if json_output:
        try:
            saved_json = render_json(report, json_output, pretty=True)
            click.echo(f'JSON report: {saved_json}', err=True)
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')
    else:
        indent = 2 if pretty else None
        click.echo(json.dumps(report.resources, ensure_ascii=False, indent=indent))

    if report.download is not None:
        summary = report.download
        click.echo(
            f"{summary['message']} found={summary['found']} started={summary['started']} "
            f"errors={len(summary['errors'])}",
            err=True,
        )


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
