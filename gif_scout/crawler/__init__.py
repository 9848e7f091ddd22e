"""gif_scout.crawler: breadth-first GIF crawl engine."""
from gif_scout.crawler.crawler import GifCrawler, StartPageError, crawl
from gif_scout.crawler.models import CrawlSession, PageData, PageTask

__all__ = ["GifCrawler", "StartPageError", "crawl", "CrawlSession", "PageData", "PageTask"]
