from pydantic import BaseModel, Field, StrictInt, StrictStr, field_validator
from typing import Optional, List

from kinokritik.core.constants import NOT_AVAILABLE, MOVIE_THUMBNAIL

class MovieCreate(BaseModel):
    """Movie document as accepted by POST /api/movies"""
    id: StrictInt = Field(..., alias="_id", gt=0, description="Netzkino post ID")
    netzkinoId: Optional[int] = None
    slug: str = NOT_AVAILABLE
    title: str = Field(..., min_length=1)
    year: List[str] = Field(default_factory=list)
    regisseur: List[str] = Field(default_factory=list)
    stars: List[str] = Field(default_factory=list)
    overview: str = NOT_AVAILABLE
    imgNetzkino: str = MOVIE_THUMBNAIL
    imgNetzkinoSmall: str = MOVIE_THUMBNAIL
    imdbId: Optional[str] = None
    posterImdb: str = NOT_AVAILABLE
    backdropImdb: str = NOT_AVAILABLE
    queries: List[str] = Field(default_factory=list)
    savedBy: List[str] = Field(default_factory=list)
    dateFetched: Optional[str] = None

    class Config:
        populate_by_name = True

    def to_document(self) -> dict:
        doc = self.model_dump(by_alias=True)
        if doc["netzkinoId"] is None:
            doc["netzkinoId"] = doc["_id"]
        return doc

class WatchlistUpdate(BaseModel):
    """Save or unsave a movie for a user"""
    userId: StrictStr
    movieId: StrictInt = Field(..., gt=0)

    @field_validator("userId")
    @classmethod
    def user_id_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("userId must not be blank")
        return value
