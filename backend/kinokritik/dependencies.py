from fastapi import Depends
from pymongo.database import Database

from kinokritik.db import get_db
from kinokritik.repositories import MovieRepository, QueryRepository
from kinokritik.services import MovieService, ReviewService


def get_movie_service(db: Database = Depends(get_db)) -> MovieService:
    return MovieService(db)


def get_movie_repository(db: Database = Depends(get_db)) -> MovieRepository:
    return MovieRepository(db)


def get_query_repository(db: Database = Depends(get_db)) -> QueryRepository:
    return QueryRepository(db)


def get_review_service() -> ReviewService:
    return ReviewService()
