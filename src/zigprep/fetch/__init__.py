"""Source archive download and extraction."""

from .archive import extract_archive
from .http import download_archive
from .source import SourceArchive, SourceTree, ensure_source_tree

__all__ = [
    "SourceArchive",
    "SourceTree",
    "download_archive",
    "ensure_source_tree",
    "extract_archive",
]
