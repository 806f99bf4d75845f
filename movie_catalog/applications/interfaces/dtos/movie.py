from typing import List

from pydantic import BaseModel

from movie_catalog.domain.models.movie import Movie, SimilarMovie


class MovieList(BaseModel):
    movies: List[Movie]
    skip: int
    limit: int


class SimilarMovieList(BaseModel):
    movie_id: str
    movies: List[SimilarMovie]
    skip: int
    limit: int
