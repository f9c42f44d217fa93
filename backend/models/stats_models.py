from pydantic import BaseModel


class MonthlyStats(BaseModel):
    totalAmount: float
    totalSoldItems: int
    totalNotSoldItems: int
