import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from kinokritik.core.exceptions import InvalidInputException
from kinokritik.dependencies import get_query_repository
from kinokritik.repositories import QueryRepository
from kinokritik.routers.errors import handle_exception
from kinokritik.schemas.query import QueryCreate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/queries", tags=["queries"])


@router.get("")
def get_queries(query_repo: QueryRepository = Depends(get_query_repository)):
    try:
        queries = query_repo.get_all_queries()
    except Exception as e:
        raise handle_exception(e, "Error fetching queries")

    if not queries:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"status": "Not Found"})
    return queries


@router.post("", status_code=status.HTTP_201_CREATED)
def create_query(
    payload: Any = Body(None),
    query_repo: QueryRepository = Depends(get_query_repository)
):
    try:
        body = QueryCreate.model_validate(payload or {})
        result = query_repo.post_query(body.query)
    except (ValidationError, InvalidInputException) as e:
        logger.warning(f"Rejected query payload: {e}")
        raise InvalidInputException("Error creating query")
    except Exception as e:
        raise handle_exception(e, "Error creating query", InvalidInputException)

    return {"success": True, "status": "Query created", "data": result["data"]}
