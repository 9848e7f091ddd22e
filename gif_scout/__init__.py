"""
GifScout package initializer.
Defines package version and exposes the crawl entry point.
"""
__version__ = "0.1.0"

from gif_scout.crawler.crawler import GifCrawler, crawl  # noqa: E402

__all__ = ["__version__", "GifCrawler", "crawl"]
