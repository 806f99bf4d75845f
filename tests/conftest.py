from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from neo4j import AsyncGraphDatabase

from movie_catalog.domain.models.pagination import SortedPage
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.services.logger import LoggerPort
from movie_catalog.infrastructure.adapters.repositories.neo4j_movie_repository import Neo4jMovieRepository

SEED_CYPHER = """
CREATE (inception:Movie {tmdbId: '27205', title: 'Inception', released: '2010-07-16', imdbRating: 8.8, year: 2010})
CREATE (matrix:Movie {tmdbId: '603', title: 'The Matrix', released: '1999-03-31', imdbRating: 8.7, year: 1999})
CREATE (goodfellas:Movie {tmdbId: '769', title: 'Goodfellas', released: '1990-09-21', imdbRating: 8.7, year: 1990})
CREATE (untitled:Movie {tmdbId: '1', imdbRating: 5.0})
CREATE (scifi:Genre {name: 'Sci-Fi'})
CREATE (crime:Genre {name: 'Crime'})
CREATE (action:Genre {name: 'Action'})
CREATE (nolan:Person {tmdbId: '525', name: 'Christopher Nolan', born: date('1970-07-30')})
CREATE (dicaprio:Person {tmdbId: '6193', name: 'Leonardo DiCaprio'})
CREATE (reeves:Person {tmdbId: '6384', name: 'Keanu Reeves'})
CREATE (liotta:Person {tmdbId: '2224', name: 'Ray Liotta'})
CREATE (scorsese:Person {tmdbId: '1032', name: 'Martin Scorsese'})
CREATE (inception)-[:IN_GENRE]->(scifi)
CREATE (inception)-[:IN_GENRE]->(action)
CREATE (matrix)-[:IN_GENRE]->(scifi)
CREATE (matrix)-[:IN_GENRE]->(action)
CREATE (goodfellas)-[:IN_GENRE]->(crime)
CREATE (nolan)-[:DIRECTED]->(inception)
CREATE (scorsese)-[:DIRECTED]->(goodfellas)
CREATE (dicaprio)-[:ACTED_IN {role: 'Cobb'}]->(inception)
CREATE (reeves)-[:ACTED_IN {role: 'Neo'}]->(matrix)
CREATE (liotta)-[:ACTED_IN {role: 'Henry Hill'}]->(goodfellas)
CREATE (u1:User {userId: 'u1', name: 'Favorites User'})
CREATE (u2:User {userId: 'u2', name: 'New User'})
CREATE (u1)-[:HAS_FAVORITE]->(inception)
CREATE (u1)-[:RATED {rating: 5}]->(inception)
CREATE (u2)-[:RATED {rating: 4}]->(inception)
"""


class FakeResult:
    def __init__(self, rows: List[Dict[str, Any]]):
        self._rows = rows

    async def data(self) -> List[Dict[str, Any]]:
        return self._rows


class FakeTransaction:
    """Records every query it runs and answers with the queued rows, in order."""

    def __init__(self, responses: List[List[Dict[str, Any]]]):
        self.responses = list(responses)
        self.queries: List[Any] = []

    async def run(self, query, parameters: Optional[Dict[str, Any]] = None, **kwargs):
        self.queries.append((query, dict(parameters or {})))
        return FakeResult(self.responses.pop(0) if self.responses else [])

    @property
    def query_texts(self) -> List[str]:
        return [getattr(query, "text", query) for query, _ in self.queries]


class FakeSession:
    def __init__(self, tx: FakeTransaction, error: Optional[Exception] = None):
        self.tx = tx
        self.error = error
        self.closed = False

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.closed = True
        return False

    async def execute_read(self, work, *args, **kwargs):
        if self.error is not None:
            raise self.error
        return await work(self.tx, *args, **kwargs)


class FakeDriver:
    def __init__(self, responses: Optional[List[List[Dict[str, Any]]]] = None, error: Optional[Exception] = None):
        self.tx = FakeTransaction(responses or [])
        self.error = error
        self.sessions: List[FakeSession] = []
        self.session_kwargs: List[Dict[str, Any]] = []

    def session(self, **kwargs):
        self.session_kwargs.append(kwargs)
        session = FakeSession(self.tx, self.error)
        self.sessions.append(session)
        return session


@pytest.fixture
def mock_logger():
    """Logger port double for asserting log calls"""
    return MagicMock(spec=LoggerPort)


@pytest.fixture
def mock_movie_repository():
    """Mock movie repository for use case testing"""
    return AsyncMock(spec=MovieRepository)


@pytest.fixture
def default_page():
    return SortedPage()


@pytest.fixture
def fake_driver_factory():
    return FakeDriver


def start_container(container_factory, image: str):
    """Create and start a container, skipping the test when Docker is unavailable."""
    try:
        container = container_factory(image)
        container.start()
    except Exception as e:
        pytest.skip(f"Container {image} could not be started: {e}")
    return container


@pytest.fixture(scope="session")
def neo4j_container():
    """Start a Neo4j container once per test session"""
    testcontainers_neo4j = pytest.importorskip("testcontainers.neo4j")
    container = start_container(testcontainers_neo4j.Neo4jContainer, "neo4j:5")
    yield container
    container.stop()


@pytest_asyncio.fixture
async def neo4j_driver(neo4j_container):
    driver = AsyncGraphDatabase.driver(
        neo4j_container.get_connection_url(),
        auth=(neo4j_container.username, neo4j_container.password),
    )
    await driver.execute_query("MATCH (n) DETACH DELETE n")
    await driver.execute_query(SEED_CYPHER)
    yield driver
    await driver.close()


@pytest.fixture
def movie_repository(neo4j_driver, mock_logger):
    return Neo4jMovieRepository(driver=neo4j_driver, logger=mock_logger)
