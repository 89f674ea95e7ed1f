from fastapi import APIRouter, Depends

from kinokritik.core.constants import RANDOM_QUERIES
from kinokritik.dependencies import get_movie_service
from kinokritik.routers.errors import handle_exception
from kinokritik.services import MovieService

router = APIRouter(prefix="/api/moviesoftheday", tags=["movies"])


@router.get("")
def get_movies_of_the_day(movie_service: MovieService = Depends(get_movie_service)):
    try:
        return movie_service.get_movies_of_the_day(RANDOM_QUERIES)
    except Exception as e:
        raise handle_exception(e, "Internal Server Error")
