from movie_catalog.applications.interfaces.dtos.movie import MovieList
from movie_catalog.domain.models.pagination import SortedPage
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository


class GetMoviesUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, page: SortedPage) -> MovieList:
        movies = await self.movie_repository.all(page)
        return MovieList(movies=movies, skip=page.skip, limit=page.limit)
