from datetime import date, datetime
from typing import Annotated, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, Strict, StrictBool, StrictFloat, StrictInt, StrictStr

# Values a graph property can hold once driver types are converted to native ones
Scalar = Union[StrictBool, StrictInt, StrictFloat, StrictStr, datetime, date]
# Strict lists: tuple-based driver types (Duration, Point) are not property lists
AttributeValue = Union[Scalar, Annotated[List[Scalar], Strict()]]


class GraphRecord(BaseModel):
    """Open record: declared fields are typed, any other property is kept as an extra."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    __pydantic_extra__: Dict[str, AttributeValue]

    def to_dict(self) -> Dict[str, object]:
        return self.model_dump(by_alias=True, exclude_none=True)


class Genre(GraphRecord):
    name: str


class Person(GraphRecord):
    tmdb_id: Optional[str] = Field(default=None, alias="tmdbId")
    name: Optional[str] = None


class CastMember(Person):
    role: Optional[str] = None


class Movie(GraphRecord):
    tmdb_id: Optional[str] = Field(default=None, alias="tmdbId")
    title: Optional[str] = None
    favorite: bool = False


class MovieDetails(Movie):
    actors: List[CastMember] = Field(default_factory=list)
    directors: List[Person] = Field(default_factory=list)
    genres: List[Genre] = Field(default_factory=list)
    rating_count: int = Field(default=0, alias="ratingCount")


class SimilarMovie(Movie):
    score: float = 0.0
