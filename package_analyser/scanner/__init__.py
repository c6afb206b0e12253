"""Declaration scanner: Go source in, ScanResult out."""

from .go_scan import GoScanner, is_exported, is_exported_function

__all__ = ["GoScanner", "is_exported", "is_exported_function"]
