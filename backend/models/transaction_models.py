from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, PrivateAttr


class Transaction(BaseModel):
    # Source fields we don't use (id, image, ...) ride along untouched
    model_config = ConfigDict(extra="allow")

    title: Optional[str] = ""
    description: Optional[str] = ""
    price: Optional[Union[int, float]] = None
    category: Optional[str] = None
    dateOfSale: Optional[datetime] = None
    sold: Optional[bool] = False

    _source: Optional[Dict[str, Any]] = PrivateAttr(default=None)

    @classmethod
    def from_source(cls, item: Dict[str, Any]) -> "Transaction":
        transaction = cls.model_validate(item)
        transaction._source = item
        return transaction

    def to_payload(self) -> Dict[str, Any]:
        """The record exactly as the source sent it, when there is one."""
        if self._source is not None:
            return self._source
        return self.model_dump(mode="json")


class TransactionPage(BaseModel):
    transactions: List[Dict[str, Any]]
    totalCount: int
    totalPages: int
    currentPage: int
