import logging
from typing import Any

from fastapi import APIRouter, Body, Depends
from pydantic import ValidationError

from kinokritik.core.exceptions import BaseAppException, InvalidInputException
from kinokritik.dependencies import get_review_service
from kinokritik.schemas.review import ReviewRequest, ReviewResponse
from kinokritik.services import ReviewService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/review", tags=["review"])

MISSING_TITLE_OR_DIRECTOR = "Please provide both a movie title and a director."


@router.post("", response_model=ReviewResponse)
def create_review(
    payload: Any = Body(None),
    review_service: ReviewService = Depends(get_review_service)
):
    try:
        body = ReviewRequest.model_validate(payload or {})
    except ValidationError:
        raise InvalidInputException(MISSING_TITLE_OR_DIRECTOR)
    if not body.is_complete():
        raise InvalidInputException(MISSING_TITLE_OR_DIRECTOR)

    try:
        review = review_service.generate_movie_review(body.title, body.regisseur)
    except Exception as e:
        logger.error(f"Error generating review: {e}", exc_info=e)
        detail = str(e) or "An unexpected error occurred"
        raise BaseAppException(f"Failed to generate review: {detail}")

    return ReviewResponse(review=review)
