import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status

import models, schemas
from exceptions import BookNotFoundError
from isbn import normalize
from repository import BookRepository, get_book_repository

router = APIRouter(prefix="/books", tags=["Books"])
logger = logging.getLogger(__name__)

BookId = Annotated[int, Path(ge=schemas.MIN_INT, le=schemas.MAX_INT)]


def _get_book_or_404(repository: BookRepository, book_id: int) -> models.Book:
    db_book = repository.find_by_id(book_id)
    if db_book is None:
        raise BookNotFoundError(book_id)
    return db_book


# Get Books
@router.get("", response_model=list[schemas.BookOut])
def get_books(repository: BookRepository = Depends(get_book_repository)):
    return repository.find_all()


@router.get("/{book_id}", response_model=schemas.BookOut)
def get_book(book_id: BookId, repository: BookRepository = Depends(get_book_repository)):
    return _get_book_or_404(repository, book_id)


# Add Book
@router.post("", response_model=schemas.BookOut)
def add_book(
    book: schemas.BookIn,
    repository: BookRepository = Depends(get_book_repository),
):
    new_book = models.Book(
        isbn=normalize(book.isbn),
        title=book.title,
        author=book.author,
        number_of_pages=book.number_of_pages,
        rating=book.rating,
    )

    new_book = repository.save(new_book)
    logger.info(f"Created book {new_book.id} ({new_book.isbn})")
    return new_book


# The path id wins; an id in the body is never read.
@router.put("/{book_id}", response_model=schemas.BookOut)
def update_book(
    book_id: BookId,
    book: schemas.BookIn,
    repository: BookRepository = Depends(get_book_repository),
):
    db_book = _get_book_or_404(repository, book_id)

    db_book.isbn = normalize(book.isbn)
    db_book.title = book.title
    db_book.author = book.author
    db_book.number_of_pages = book.number_of_pages
    db_book.rating = book.rating

    db_book = repository.save(db_book)
    logger.info(f"Updated book {db_book.id}")
    return db_book


@router.delete("/{book_id}")
def delete_book(book_id: BookId, repository: BookRepository = Depends(get_book_repository)):
    db_book = _get_book_or_404(repository, book_id)

    repository.delete(db_book)
    logger.info(f"Deleted book {book_id}")
    return Response(status_code=status.HTTP_200_OK)
