from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from kinokritik.core.exceptions import InvalidInputException, MovieNotFoundException
from kinokritik.dependencies import get_movie_service, get_movie_repository
from kinokritik.repositories import MovieRepository
from kinokritik.routers.errors import handle_exception
from kinokritik.schemas.movie import MovieCreate, WatchlistUpdate
from kinokritik.services import MovieService

router = APIRouter(prefix="/api/movies", tags=["movies"])

MISSING_FIELDS = "Missing required fields"
INVALID_WATCHLIST_BODY = "userId and movieId must be non-empty strings"
WATCHLIST_MOVIE_NOT_FOUND = "Movie not Found"


def not_found(message: str) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"status": message})


# Cached movie operations
@router.get("")
def get_movies(
    query: Optional[str] = Query(None, description="Search string the movies were fetched for"),
    slug: Optional[str] = Query(None, description="Netzkino slug"),
    movie_service: MovieService = Depends(get_movie_service)
):
    try:
        movies = movie_service.list_movies(query=query, slug=slug)
    except Exception as e:
        raise handle_exception(e, "Error fetching movies")

    if movies:
        return movies
    if query:
        return not_found("No movies found for the given query")
    return not_found("Not Found")


@router.post("", status_code=status.HTTP_201_CREATED)
def create_movies(
    payload: Any = Body(None),
    movie_service: MovieService = Depends(get_movie_service)
):
    is_batch = isinstance(payload, list)
    items = payload if is_batch else [payload]
    try:
        documents = [MovieCreate.model_validate(item).to_document() for item in items]
    except ValidationError:
        raise InvalidInputException(MISSING_FIELDS)
    if not documents:
        raise InvalidInputException(MISSING_FIELDS)

    try:
        if is_batch:
            created = movie_service.create_movies(documents)
            return {"success": True, "status": "Movies created", "data": created}
        created = movie_service.create_movie(documents[0])
        return {"success": True, "status": "Movie created", "data": created}
    except Exception as e:
        raise handle_exception(e, "Error creating movie")


# Netzkino search
@router.get("/search")
def search_movies(
    query: Optional[str] = Query(None, description="Search string"),
    movie_service: MovieService = Depends(get_movie_service)
):
    if not query or not query.strip():
        raise InvalidInputException("Query parameter is required")
    try:
        movies = movie_service.get_search_movies(query)
    except Exception as e:
        raise handle_exception(e, "Error fetching movies")

    if not movies:
        return {"results": [], "message": "No movies found"}
    return movies


# Watchlist operations
@router.get("/watchlist")
def get_watchlist(
    userid: Optional[str] = Query(None, description="User whose saved movies to list"),
    movie_repo: MovieRepository = Depends(get_movie_repository)
):
    if not userid or not userid.strip():
        raise InvalidInputException("UserId parameter is required")
    try:
        return movie_repo.get_movies_by_user(userid)
    except Exception as e:
        raise handle_exception(e, "Error fetching movies")


def parse_watchlist_body(payload: Any) -> WatchlistUpdate:
    try:
        return WatchlistUpdate.model_validate(payload or {})
    except ValidationError:
        raise InvalidInputException(INVALID_WATCHLIST_BODY)


@router.put("/watchlist")
def add_to_watchlist(
    payload: Any = Body(None),
    movie_repo: MovieRepository = Depends(get_movie_repository)
):
    body = parse_watchlist_body(payload)
    try:
        updated = movie_repo.add_user_id_to_movie(body.movieId, body.userId)
    except Exception as e:
        raise handle_exception(e, "Something went wrong")

    if not updated:
        return not_found(WATCHLIST_MOVIE_NOT_FOUND)
    return updated


@router.delete("/watchlist")
def remove_from_watchlist(
    payload: Any = Body(None),
    movie_repo: MovieRepository = Depends(get_movie_repository)
):
    body = parse_watchlist_body(payload)
    try:
        updated = movie_repo.remove_user_id_from_movie(body.movieId, body.userId)
    except Exception as e:
        raise handle_exception(e, "Error deleting userId from movie")

    if not updated:
        return not_found(WATCHLIST_MOVIE_NOT_FOUND)
    return updated


@router.get("/{movie_id}")
def get_movie_by_id(
    movie_id: str,
    movie_service: MovieService = Depends(get_movie_service)
):
    if not movie_id.strip():
        raise InvalidInputException("Movie ID is required")
    try:
        movie = movie_service.get_movie(movie_id)
    except Exception as e:
        raise handle_exception(e, "Error fetching movie by ID")

    if not movie:
        raise MovieNotFoundException("Movie Not Found")
    return movie
