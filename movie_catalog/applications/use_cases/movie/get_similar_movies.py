from movie_catalog.applications.interfaces.dtos.movie import SimilarMovieList
from movie_catalog.applications.use_cases.movie.identifiers import require_identifier
from movie_catalog.domain.models.pagination import Page
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository


class GetSimilarMoviesUseCase:
    """Movies ranked by how many actors, directors and genres they share with the given movie."""

    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, movie_id: str, page: Page) -> SimilarMovieList:
        movie_id = require_identifier(movie_id, "Movie id")
        movies = await self.movie_repository.get_similar_movies(movie_id, page)
        return SimilarMovieList(movie_id=movie_id, movies=movies, skip=page.skip, limit=page.limit)
