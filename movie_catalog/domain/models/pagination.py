from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from movie_catalog.domain.exceptions import ValidationError

DEFAULT_PAGE_SIZE = 6
MAX_PAGE_SIZE = 100


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            normalized = value.strip().upper()
            aliases = {"ASCENDING": cls.ASC, "DESCENDING": cls.DESC}
            if normalized in aliases:
                return aliases[normalized]
            for member in cls:
                if member.value == normalized:
                    return member
        return None


class MovieSort(str, Enum):
    """Movie properties a listing may be ordered by."""

    TITLE = "title"
    RELEASED = "released"
    IMDB_RATING = "imdbRating"
    YEAR = "year"
    RUNTIME = "runtime"
    BUDGET = "budget"
    REVENUE = "revenue"
    IMDB_VOTES = "imdbVotes"


class Page(BaseModel):
    model_config = ConfigDict(frozen=True)

    skip: int = Field(default=0, ge=0, description="Number of records to skip")
    limit: int = Field(default=DEFAULT_PAGE_SIZE, ge=0, le=MAX_PAGE_SIZE, description="Maximum records to return")
    user_id: Optional[str] = Field(default=None, description="User whose favorites annotate the results")

    @classmethod
    def from_params(cls, **params):
        """Build the options from raw caller input, raising the domain ``ValidationError`` on bad values."""
        try:
            return cls(**{key: value for key, value in params.items() if value is not None})
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid {cls.__name__.lower()} parameters: {e}") from e


class SortedPage(Page):
    sort: MovieSort = MovieSort.TITLE
    order: SortOrder = SortOrder.ASC
