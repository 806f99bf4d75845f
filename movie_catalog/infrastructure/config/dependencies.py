from functools import lru_cache
from typing import Optional

from neo4j import AsyncDriver

from movie_catalog.applications.use_cases.movie.get_movie import GetMovieUseCase
from movie_catalog.applications.use_cases.movie.get_movies import GetMoviesUseCase
from movie_catalog.applications.use_cases.movie.get_movies_by_genre import GetMoviesByGenreUseCase
from movie_catalog.applications.use_cases.movie.get_movies_for_person import (
    GetMoviesForActorUseCase,
    GetMoviesForDirectorUseCase,
)
from movie_catalog.applications.use_cases.movie.get_similar_movies import GetSimilarMoviesUseCase
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.services.logger import LoggerPort
from movie_catalog.infrastructure.adapters.repositories.neo4j_movie_repository import Neo4jMovieRepository
from movie_catalog.infrastructure.config.settings import GraphDatabaseSettings
from movie_catalog.infrastructure.logging.std_logger_adapter import StdLoggerAdapter
from movie_catalog.infrastructure.persistence.graph_database import get_driver


@lru_cache
def get_settings() -> GraphDatabaseSettings:
    return GraphDatabaseSettings()


def get_logger(name: str = "movie_catalog") -> LoggerPort:
    return StdLoggerAdapter(name)


def get_movie_repository(
    driver: Optional[AsyncDriver] = None,
    settings: Optional[GraphDatabaseSettings] = None,
    logger: Optional[LoggerPort] = None,
) -> MovieRepository:
    settings = settings or get_settings()
    return Neo4jMovieRepository(
        driver=driver or get_driver(),
        logger=logger or get_logger(Neo4jMovieRepository.__module__),
        database=settings.database,
        query_timeout=settings.query_timeout,
    )


def get_movies_use_case(movie_repository: MovieRepository) -> GetMoviesUseCase:
    return GetMoviesUseCase(movie_repository)


def get_movies_by_genre_use_case(movie_repository: MovieRepository) -> GetMoviesByGenreUseCase:
    return GetMoviesByGenreUseCase(movie_repository)


def get_movies_for_actor_use_case(movie_repository: MovieRepository) -> GetMoviesForActorUseCase:
    return GetMoviesForActorUseCase(movie_repository)


def get_movies_for_director_use_case(movie_repository: MovieRepository) -> GetMoviesForDirectorUseCase:
    return GetMoviesForDirectorUseCase(movie_repository)


def get_movie_use_case(movie_repository: MovieRepository, logger: Optional[LoggerPort] = None) -> GetMovieUseCase:
    return GetMovieUseCase(movie_repository, logger=logger or get_logger(GetMovieUseCase.__module__))


def get_similar_movies_use_case(movie_repository: MovieRepository) -> GetSimilarMoviesUseCase:
    return GetSimilarMoviesUseCase(movie_repository)
