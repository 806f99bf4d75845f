from typing import Optional

from movie_catalog.applications.use_cases.movie.identifiers import require_identifier
from movie_catalog.domain.exceptions import NotFoundError
from movie_catalog.domain.models.movie import MovieDetails
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.services.logger import LoggerPort


class GetMovieUseCase:
    def __init__(self, movie_repository: MovieRepository, logger: LoggerPort):
        self.movie_repository = movie_repository
        self.logger = logger

    async def execute(self, movie_id: str, user_id: Optional[str] = None) -> MovieDetails:
        movie_id = require_identifier(movie_id, "Movie id")
        movie = await self.movie_repository.find_by_id(movie_id, user_id=user_id)
        if movie is None:
            self.logger.warning("Movie with tmdbId %s not found", movie_id)
            raise NotFoundError(f"Movie with id {movie_id} not found")

        return movie
