from .categories import CATEGORIES, categorize
from .export import EXPORT_FORMATS, dump_batch, dump_report, write_export
from .snippets import Snippet, SnippetLine, extract_snippets

__all__ = [
    "CATEGORIES",
    "EXPORT_FORMATS",
    "Snippet",
    "SnippetLine",
    "categorize",
    "dump_batch",
    "dump_report",
    "extract_snippets",
    "write_export",
]
