from typing import Optional
from pydantic import BaseModel

class ReviewRequest(BaseModel):
    """Title and director of the movie to review"""
    title: Optional[str] = None
    regisseur: Optional[str] = None

    def is_complete(self) -> bool:
        return bool(self.title and self.title.strip() and self.regisseur and self.regisseur.strip())

class ReviewResponse(BaseModel):
    review: str
