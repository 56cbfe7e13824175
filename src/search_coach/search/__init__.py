"""Web search transport, result adaptation and request handling."""

from search_coach.search.adapter import ResultAdapter
from search_coach.search.base import WebSearcher
from search_coach.search.bing import BingSearcher
from search_coach.search.service import SearchService

__all__ = ["BingSearcher", "ResultAdapter", "SearchService", "WebSearcher"]
