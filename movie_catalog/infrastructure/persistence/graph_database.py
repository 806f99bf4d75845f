from typing import Optional

from neo4j import AsyncDriver, AsyncGraphDatabase

from movie_catalog.domain.exceptions import ConfigurationError
from movie_catalog.infrastructure.config.settings import GraphDatabaseSettings


class _DriverStore:
    driver: Optional[AsyncDriver] = None


def set_driver(driver: AsyncDriver) -> None:
    _DriverStore.driver = driver


def create_driver(settings: GraphDatabaseSettings) -> AsyncDriver:
    if not settings.uri:
        raise ConfigurationError("NEO4J_URI is not configured")
    auth = (settings.username, settings.password) if settings.password is not None else None
    return AsyncGraphDatabase.driver(
        settings.uri,
        auth=auth,
        max_connection_pool_size=settings.max_connection_pool_size,
    )


def get_driver() -> AsyncDriver:
    if _DriverStore.driver is None:
        _DriverStore.driver = create_driver(GraphDatabaseSettings())
    return _DriverStore.driver


async def close_driver() -> None:
    if _DriverStore.driver is not None:
        await _DriverStore.driver.close()
        _DriverStore.driver = None
