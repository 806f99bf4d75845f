from movie_catalog.applications.interfaces.dtos.movie import MovieList
from movie_catalog.applications.use_cases.movie.identifiers import require_identifier
from movie_catalog.domain.models.pagination import SortedPage
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository


class GetMoviesForActorUseCase:
    """Movies the person has an ACTED_IN relationship to."""

    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, person_id: str, page: SortedPage) -> MovieList:
        movies = await self.movie_repository.get_for_actor(require_identifier(person_id, "Person id"), page)
        return MovieList(movies=movies, skip=page.skip, limit=page.limit)


class GetMoviesForDirectorUseCase:
    """Movies the person has a DIRECTED relationship to."""

    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, person_id: str, page: SortedPage) -> MovieList:
        movies = await self.movie_repository.get_for_director(require_identifier(person_id, "Person id"), page)
        return MovieList(movies=movies, skip=page.skip, limit=page.limit)
