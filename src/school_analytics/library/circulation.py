"""Library catalog and per-student loan tracking."""

import threading
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Deque, Dict, List, Optional

from loguru import logger

from ..errors import BookNotFoundError


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Book:
    """A catalog entry."""

    isbn: str
    title: str = ""
    available: bool = True

    def __str__(self) -> str:
        status = "available" if self.available else "borrowed"
        return f"{self.isbn} - {self.title} ({status})"


@dataclass
class BorrowRecord:
    """A loan of one book to one student."""

    isbn: str
    borrowed_at: datetime = field(default_factory=_utcnow)
    returned_at: Optional[datetime] = None

    @property
    def is_returned(self) -> bool:
        return self.returned_at is not None


class LibrarySystem:
    """Book catalog with a LIFO stack of outstanding loans per student."""

    def __init__(self) -> None:
        self._catalog: Dict[str, Book] = {}
        self._loans: Dict[str, Deque[BorrowRecord]] = {}
        self._lock = threading.Lock()

    def add_book(self, book: Book) -> None:
        """Add a book, replacing any entry with the same ISBN."""
        with self._lock:
            self._catalog[book.isbn] = book

    def find_book(self, isbn: str) -> Optional[Book]:
        with self._lock:
            return self._catalog.get(isbn)

    def list_books(self) -> List[Book]:
        with self._lock:
            return list(self._catalog.values())

    def borrow_book(self, student_id: str, isbn: str) -> bool:
        """Lend a book to a student.

        Returns:
            True if lent, False if the book is already out.

        Raises:
            BookNotFoundError: If the ISBN is not in the catalog.
        """
        with self._lock:
            book = self._require_book(isbn)
            if not book.available:
                logger.warning(f"Book {isbn} requested by {student_id} is not available")
                return False

            self._loans.setdefault(student_id, deque()).appendleft(BorrowRecord(isbn))
            book.available = False

        logger.debug(f"Book {isbn} lent to {student_id}")
        return True

    def return_book(self, student_id: str, isbn: str) -> bool:
        """Return a book and close the student's most recent loan of it.

        The book becomes available even when no matching loan is on record.

        Raises:
            BookNotFoundError: If the ISBN is not in the catalog.
        """
        with self._lock:
            book = self._require_book(isbn)
            loans = self._loans.get(student_id)
            if loans:
                record = next((r for r in loans if r.isbn == isbn), None)
                if record is not None:
                    loans.remove(record)
                    record.returned_at = _utcnow()
            book.available = True

        logger.debug(f"Book {isbn} returned by {student_id}")
        return True

    def borrow_history(self, student_id: str) -> List[BorrowRecord]:
        """Outstanding loans for a student, most recent first."""
        with self._lock:
            return list(self._loans.get(student_id, ()))

    def _require_book(self, isbn: str) -> Book:
        book = self._catalog.get(isbn)
        if book is None:
            raise BookNotFoundError(f"Book not found: {isbn}")
        return book
