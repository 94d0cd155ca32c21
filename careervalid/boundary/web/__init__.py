"""Public web page boundary."""

from .portfolio_fetcher import PortfolioFetcher, PortfolioPage, extract_page_metadata

__all__ = ["PortfolioFetcher", "PortfolioPage", "extract_page_metadata"]
