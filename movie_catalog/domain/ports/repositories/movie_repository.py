from abc import ABC, abstractmethod
from typing import List, Optional

from movie_catalog.domain.models.movie import Movie, MovieDetails, SimilarMovie
from movie_catalog.domain.models.pagination import Page, SortedPage


class MovieRepository(ABC):
    @abstractmethod
    async def all(self, page: SortedPage) -> List[Movie]:
        pass

    @abstractmethod
    async def get_by_genre(self, name: str, page: SortedPage) -> List[Movie]:
        pass

    @abstractmethod
    async def get_for_actor(self, person_id: str, page: SortedPage) -> List[Movie]:
        pass

    @abstractmethod
    async def get_for_director(self, person_id: str, page: SortedPage) -> List[Movie]:
        pass

    @abstractmethod
    async def find_by_id(self, movie_id: str, user_id: Optional[str] = None) -> Optional[MovieDetails]:
        pass

    @abstractmethod
    async def get_similar_movies(self, movie_id: str, page: Page) -> List[SimilarMovie]:
        pass
