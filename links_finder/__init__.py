"""
LinksFinder package initializer.
Defines package version and exposes the crawl entry point.
"""
__version__ = "0.1.0"

from links_finder.engine import crawl  # noqa: E402

__all__ = ["__version__", "crawl"]
