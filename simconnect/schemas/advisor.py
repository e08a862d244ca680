from pydantic import BaseModel, Field


class AdvisorQuery(BaseModel):
    query: str = Field(min_length=1, max_length=2000)


class AdvisorReply(BaseModel):
    answer: str
    offline: bool = False
