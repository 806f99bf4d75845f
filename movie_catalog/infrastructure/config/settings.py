from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphDatabaseSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="NEO4J_", extra="ignore")

    uri: Optional[str] = None
    username: str = "neo4j"
    password: Optional[str] = None
    database: str = "neo4j"
    query_timeout: Optional[float] = None  # seconds, applied to every transaction query
    max_connection_pool_size: int = 100
