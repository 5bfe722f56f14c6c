"""Library circulation."""

from .circulation import Book, BorrowRecord, LibrarySystem

__all__ = ["Book", "BorrowRecord", "LibrarySystem"]
