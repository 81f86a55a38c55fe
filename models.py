from sqlalchemy import CheckConstraint, Column, Integer, String

from database import Base


class Book(Base):
    __tablename__ = "books"
    __table_args__ = (
        CheckConstraint("length(title) > 0", name="ck_books_title_not_empty"),
        CheckConstraint("length(author) > 0", name="ck_books_author_not_empty"),
        CheckConstraint("number_of_pages >= 1", name="ck_books_number_of_pages_positive"),
        CheckConstraint("rating BETWEEN 1 AND 5", name="ck_books_rating_range"),
    )

    id = Column(Integer, primary_key=True)
    isbn = Column(String(13), nullable=False)
    title = Column(String, nullable=False)
    author = Column(String, nullable=False)
    number_of_pages = Column(Integer, nullable=False)
    rating = Column(Integer, nullable=False)

    def __repr__(self) -> str:
        return (
            f"Book(id={self.id!r}, isbn={self.isbn!r}, title={self.title!r}, "
            f"author={self.author!r}, number_of_pages={self.number_of_pages!r}, rating={self.rating!r})"
        )
