from .config import Settings, get_settings
from .driver import build_sources, ensure_source, main, print_items, run

__all__ = ["Settings", "get_settings", "build_sources", "ensure_source", "main", "print_items", "run"]
