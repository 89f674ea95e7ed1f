from pydantic import BaseModel, StrictStr, field_validator

class QueryCreate(BaseModel):
    """Search string to record in the query cache"""
    query: StrictStr

    @field_validator("query")
    @classmethod
    def query_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("query must not be blank")
        return value
