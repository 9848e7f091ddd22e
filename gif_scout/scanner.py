# === FILE: gif_scout/scanner.py ===
"""
Модуль-обёртка для запуска обхода и передачи результата загрузчику.
"""

from gif_scout.aggregator import CrawlReport, build_report
from gif_scout.config import ScoutConfig
from gif_scout.crawler.crawler import GifCrawler
from gif_scout.downloader import GifDownloader


async def start_scan(cfg: ScoutConfig, start_url: str, *, download: bool = False) -> CrawlReport:
    """
    Загружает стартовую страницу, обходит ссылки и возвращает CrawlReport.

    Parameters
    ----------
    cfg : ScoutConfig
        Конфигурация обхода и загрузки.
    start_url : str
        Стартовая страница; её загрузка не учитывается в max_pages.
    download : bool
        Передать найденные URL в GifDownloader.
    """
    async with GifCrawler(cfg.crawl) as crawler:
        await crawler.crawl_url(start_url)
        report = build_report(start_url, crawler.last_session)
        if download:
            downloader = GifDownloader(crawler.session, cfg.download)
            summary = await downloader.consume(report.resources)
            report.download = summary.as_dict()
    return report


__all__ = ["start_scan"]
