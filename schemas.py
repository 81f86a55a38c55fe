from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

import isbn as isbn_rules

# Error type shared by every field rule below; the error mapper uses it to tell
# constraint violations apart from malformed input.
CONSTRAINT_ERROR_TYPE = "book_constraint"

# Range an INTEGER column holds; numbers outside it are malformed input.
MAX_INT = 2**31 - 1
MIN_INT = -(2**31)
BoundedInt = Annotated[int, Field(le=MAX_INT)]


def _violation(message: str) -> PydanticCustomError:
    return PydanticCustomError(CONSTRAINT_ERROR_TYPE, message)


class BookIn(BaseModel):
    """Payload accepted by create and update. Any id in the body is ignored."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    # Fields default to None so that missing values reach the validators
    # and get reported with their own message.
    isbn: str | None = Field(default=None, validate_default=True)
    title: str | None = Field(default=None, validate_default=True)
    author: str | None = Field(default=None, validate_default=True)
    number_of_pages: BoundedInt | None = Field(
        default=None, validation_alias="numberOfPages", validate_default=True
    )
    rating: BoundedInt | None = Field(default=None, validate_default=True)

    @field_validator("isbn")
    @classmethod
    def check_isbn(cls, value: str | None) -> str | None:
        if value is None:
            raise _violation("ISBN required")
        if not isbn_rules.is_valid(value):
            raise _violation("Invalid ISBN")
        return value

    @field_validator("title")
    @classmethod
    def check_title(cls, value: str | None) -> str | None:
        if not value:
            raise _violation("Title required")
        return value

    @field_validator("author")
    @classmethod
    def check_author(cls, value: str | None) -> str | None:
        if not value:
            raise _violation("Author required")
        return value

    @field_validator("number_of_pages")
    @classmethod
    def check_number_of_pages(cls, value: int | None) -> int | None:
        if value is None:
            raise _violation("Number of pages required")
        if value < 1:
            raise _violation("Number of pages must be greater than 0")
        return value

    @field_validator("rating")
    @classmethod
    def check_rating(cls, value: int | None) -> int | None:
        if value is None:
            raise _violation("Rating required")
        if not 1 <= value <= 5:
            raise _violation("Rating must be between 1 and 5")
        return value


class BookOut(BaseModel):
    id: int
    isbn: str
    title: str
    author: str
    number_of_pages: int = Field(serialization_alias="numberOfPages")
    rating: int

    model_config = ConfigDict(from_attributes=True)


def constraint_violations(errors) -> list[str] | None:
    """Return the messages of ``errors`` if every one is a field rule violation.

    ``None`` means at least one error is structural (bad JSON, wrong type,
    bad path parameter) rather than a failed field rule.
    """
    if not errors or any(error["type"] != CONSTRAINT_ERROR_TYPE for error in errors):
        return None
    return [error["msg"] for error in errors]
