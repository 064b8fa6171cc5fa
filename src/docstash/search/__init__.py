"""Search module for docstash."""
from docstash.search.evaluator import SearchOrder, matches, search

__all__ = ["SearchOrder", "matches", "search"]
