"""车站数据模型"""

from typing import Any, TYPE_CHECKING
from pydantic import BaseModel, Field

from .base import Visitable

if TYPE_CHECKING:
    from ..services.visitor import TrainVisitor


class Station(BaseModel, Visitable):
    """车站信息模型"""
    name: str = Field(..., description="车站名称")
    location: str = Field(..., description="所在地")

    def display_info(self) -> str:
        return f"Station: {self.name}, Location: {self.location}"

    def accept(self, visitor: "TrainVisitor") -> Any:
        return visitor.visit_station(self)
