"""Book storage behind a small repository interface.

Endpoints depend on :class:`BookRepository` through :func:`get_book_repository`
so the backing store can be swapped (tests use the in-memory one or a mock).
"""

from abc import ABC, abstractmethod
from typing import Optional

from fastapi import Depends
from pydantic import ValidationError
from sqlalchemy.orm import Session

import models, schemas
from database import get_db
from exceptions import MalformedRequestError


def book_violations(book: models.Book) -> list[str]:
    payload = {
        "isbn": book.isbn,
        "title": book.title,
        "author": book.author,
        "numberOfPages": book.number_of_pages,
        "rating": book.rating,
    }
    try:
        schemas.BookIn.model_validate(payload)
    except ValidationError as exc:
        return [error["msg"] for error in exc.errors()]
    return []


def _ensure_persistable(book: models.Book) -> None:
    violations = book_violations(book)
    if violations:
        raise MalformedRequestError(f"Refusing to store {book!r}: {', '.join(violations)}")


class BookRepository(ABC):
    @abstractmethod
    def find_all(self) -> list[models.Book]:
        ...

    @abstractmethod
    def find_by_id(self, book_id: int) -> Optional[models.Book]:
        ...

    @abstractmethod
    def save(self, book: models.Book) -> models.Book:
        """Insert ``book`` when it has no id yet, otherwise overwrite the stored one."""

    @abstractmethod
    def delete(self, book: models.Book) -> None:
        ...


class SqlAlchemyBookRepository(BookRepository):
    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> list[models.Book]:
        return self.db.query(models.Book).order_by(models.Book.id.asc()).all()

    def find_by_id(self, book_id: int) -> Optional[models.Book]:
        return self.db.query(models.Book).filter(models.Book.id == book_id).first()

    def save(self, book: models.Book) -> models.Book:
        _ensure_persistable(book)
        if book.id is None:
            self.db.add(book)
        else:
            book = self.db.merge(book)
        self.db.commit()
        self.db.refresh(book)
        return book

    def delete(self, book: models.Book) -> None:
        self.db.delete(book)
        self.db.commit()


class InMemoryBookRepository(BookRepository):
    def __init__(self):
        self._books: dict[int, models.Book] = {}

    def find_all(self) -> list[models.Book]:
        return [self._books[book_id] for book_id in sorted(self._books)]

    def find_by_id(self, book_id: int) -> Optional[models.Book]:
        return self._books.get(book_id)

    def save(self, book: models.Book) -> models.Book:
        _ensure_persistable(book)
        if book.id is None:
            book.id = max(self._books, default=0) + 1
        self._books[book.id] = book
        return book

    def delete(self, book: models.Book) -> None:
        self._books.pop(book.id, None)


def get_book_repository(db: Session = Depends(get_db)) -> BookRepository:
    return SqlAlchemyBookRepository(db)
