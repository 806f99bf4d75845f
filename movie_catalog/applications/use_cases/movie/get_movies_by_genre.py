from movie_catalog.applications.interfaces.dtos.movie import MovieList
from movie_catalog.applications.use_cases.movie.identifiers import require_identifier
from movie_catalog.domain.models.pagination import SortedPage
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository


class GetMoviesByGenreUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, genre: str, page: SortedPage) -> MovieList:
        name = require_identifier(genre, "Genre name")
        movies = await self.movie_repository.get_by_genre(name, page)
        return MovieList(movies=movies, skip=page.skip, limit=page.limit)
