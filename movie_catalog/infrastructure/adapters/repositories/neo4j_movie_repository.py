from typing import Any, Dict, List, Optional, Set, Type, TypeVar

from neo4j import AsyncDriver, AsyncManagedTransaction, Query
from neo4j.exceptions import DriverError, Neo4jError
from neo4j.time import Date, DateTime
from pydantic import ValidationError as PydanticValidationError

from movie_catalog.domain.exceptions import RepositoryError
from movie_catalog.domain.models.movie import Movie, MovieDetails, SimilarMovie
from movie_catalog.domain.models.pagination import MovieSort, Page, SortedPage, SortOrder
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.services.logger import LoggerPort

MovieT = TypeVar("MovieT", bound=Movie)

# Trusted fragments: caller input only ever selects a key, never reaches the query text
SORT_FRAGMENTS: Dict[MovieSort, str] = {
    MovieSort.TITLE: "m.title",
    MovieSort.RELEASED: "m.released",
    MovieSort.IMDB_RATING: "m.imdbRating",
    MovieSort.YEAR: "m.year",
    MovieSort.RUNTIME: "m.runtime",
    MovieSort.BUDGET: "m.budget",
    MovieSort.REVENUE: "m.revenue",
    MovieSort.IMDB_VOTES: "m.imdbVotes",
}
ORDER_KEYWORDS: Dict[SortOrder, str] = {SortOrder.ASC: "ASC", SortOrder.DESC: "DESC"}

ALL_MOVIES_PATTERN = "(m:Movie)"
GENRE_PATTERN = "(m:Movie)-[:IN_GENRE]->(:Genre {name: $name})"
ACTOR_PATTERN = "(:Person {tmdbId: $id})-[:ACTED_IN]->(m:Movie)"
DIRECTOR_PATTERN = "(:Person {tmdbId: $id})-[:DIRECTED]->(m:Movie)"

LIST_MOVIES_QUERY = """
MATCH {pattern}
WHERE {sort} IS NOT NULL
RETURN m {{ .* }} AS movie
ORDER BY {sort} {order}
SKIP $skip
LIMIT $limit
"""

USER_FAVORITES_QUERY = """
MATCH (:User {userId: $userId})-[:HAS_FAVORITE]->(m:Movie)
RETURN m.tmdbId AS id
"""

FIND_MOVIE_QUERY = """
MATCH (m:Movie {tmdbId: $id})
RETURN m {
    .*,
    actors: [(a:Person)-[r:ACTED_IN]->(m) | a { .*, role: r.role }],
    directors: [(d:Person)-[:DIRECTED]->(m) | d { .* }],
    genres: [(m)-[:IN_GENRE]->(g:Genre) | g { .name }],
    ratingCount: COUNT { (m)<-[:RATED]-() }
} AS movie
LIMIT 1
"""

SIMILAR_MOVIES_QUERY = """
MATCH (target:Movie {tmdbId: $id})-[:ACTED_IN|DIRECTED|IN_GENRE]-(shared)-[:ACTED_IN|DIRECTED|IN_GENRE]-(m:Movie)
WHERE m <> target
WITH m, count(DISTINCT shared) AS inCommon
RETURN m { .*, score: toFloat(inCommon) } AS movie
ORDER BY inCommon DESC, coalesce(m.imdbRating, 0) DESC, m.title ASC
SKIP $skip
LIMIT $limit
"""


def build_list_query(pattern: str, page: SortedPage) -> str:
    return LIST_MOVIES_QUERY.format(
        pattern=pattern,
        sort=SORT_FRAGMENTS[page.sort],
        order=ORDER_KEYWORDS[page.order],
    )


def to_native(value: Any) -> Any:
    """Convert driver temporal types (recursively) to ``datetime.date``/``datetime.datetime``."""
    if isinstance(value, dict):
        return {key: to_native(item) for key, item in value.items()}
    if isinstance(value, list):
        return [to_native(item) for item in value]
    if isinstance(value, (Date, DateTime)):
        return value.to_native()
    return value


class Neo4jMovieRepository(MovieRepository):
    """Movie catalog reads, one session and one read transaction per call."""

    def __init__(
        self,
        driver: AsyncDriver,
        logger: LoggerPort,
        database: Optional[str] = None,
        query_timeout: Optional[float] = None,
    ):
        self.driver = driver
        self.logger = logger
        self.database = database
        self.query_timeout = query_timeout

    async def all(self, page: SortedPage) -> List[Movie]:
        query = build_list_query(ALL_MOVIES_PATTERN, page)
        return await self._list(query, {}, page, Movie)

    async def get_by_genre(self, name: str, page: SortedPage) -> List[Movie]:
        query = build_list_query(GENRE_PATTERN, page)
        return await self._list(query, {"name": name}, page, Movie)

    async def get_for_actor(self, person_id: str, page: SortedPage) -> List[Movie]:
        query = build_list_query(ACTOR_PATTERN, page)
        return await self._list(query, {"id": person_id}, page, Movie)

    async def get_for_director(self, person_id: str, page: SortedPage) -> List[Movie]:
        query = build_list_query(DIRECTOR_PATTERN, page)
        return await self._list(query, {"id": person_id}, page, Movie)

    async def find_by_id(self, movie_id: str, user_id: Optional[str] = None) -> Optional[MovieDetails]:
        rows = await self._read(self._fetch_movies, FIND_MOVIE_QUERY, {"id": movie_id}, user_id)
        if not rows:
            return None
        return self._to_models(rows[:1], MovieDetails)[0]

    async def get_similar_movies(self, movie_id: str, page: Page) -> List[SimilarMovie]:
        parameters = {"id": movie_id, "skip": page.skip, "limit": page.limit}
        rows = await self._read(self._fetch_movies, SIMILAR_MOVIES_QUERY, parameters, page.user_id)
        return self._to_models(rows, SimilarMovie)

    async def get_user_favorites(self, tx: AsyncManagedTransaction, user_id: Optional[str]) -> Set[str]:
        """Return the tmdbIds the user has added to their favorites; no query runs without a user."""
        if user_id is None:
            return set()
        result = await tx.run(self._query(USER_FAVORITES_QUERY), {"userId": user_id})
        records = await result.data()
        return {record["id"] for record in records if record["id"] is not None}

    async def _list(self, query: str, parameters: Dict[str, Any], page: SortedPage, model: Type[MovieT]) -> List[MovieT]:
        parameters = {**parameters, "skip": page.skip, "limit": page.limit}
        rows = await self._read(self._fetch_movies, query, parameters, page.user_id)
        return self._to_models(rows, model)

    async def _fetch_movies(
        self,
        tx: AsyncManagedTransaction,
        query: str,
        parameters: Dict[str, Any],
        user_id: Optional[str],
    ) -> List[Dict[str, Any]]:
        favorites = await self.get_user_favorites(tx, user_id)
        result = await tx.run(self._query(query), parameters)
        records = await result.data()
        return [self._annotate_favorite(to_native(record["movie"]), favorites) for record in records]

    async def _read(self, work, *args) -> Any:
        self.logger.debug("Running read transaction %s with %s", work.__name__, args[1:])
        try:
            async with self.driver.session(database=self.database) as session:
                return await session.execute_read(work, *args)
        except (Neo4jError, DriverError) as e:
            self.logger.error("Movie query failed: %s", e)
            raise RepositoryError(f"Failed to read movies from the graph database: {e}") from e

    def _to_models(self, rows: List[Dict[str, Any]], model: Type[MovieT]) -> List[MovieT]:
        try:
            return [model.model_validate(row) for row in rows]
        except PydanticValidationError as e:
            self.logger.error("Movie record could not be mapped to %s: %s", model.__name__, e)
            raise RepositoryError(f"Unsupported movie record returned by the graph database: {e}") from e

    def _query(self, text: str) -> Query:
        return Query(text, timeout=self.query_timeout)

    @staticmethod
    def _annotate_favorite(movie: Dict[str, Any], favorites: Set[str]) -> Dict[str, Any]:
        return {**movie, "favorite": movie.get("tmdbId") in favorites}
