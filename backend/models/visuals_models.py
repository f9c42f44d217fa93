from pydantic import BaseModel


class PriceRangeCount(BaseModel):
    range: str
    count: int


class CategoryCount(BaseModel):
    category: str
    count: int
