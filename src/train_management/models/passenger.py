"""乘客数据模型"""

from typing import Any, TYPE_CHECKING
from pydantic import BaseModel, Field

from .base import Visitable

if TYPE_CHECKING:
    from ..services.visitor import TrainVisitor


class Passenger(BaseModel, Visitable):
    """乘客信息模型"""
    name: str = Field(..., description="乘客姓名")
    ticket_number: str = Field(..., description="车票号")
    seat_number: str = Field(..., description="座位号")

    def display_info(self) -> str:
        return f"Passenger: {self.name}, Ticket: {self.ticket_number}, Seat: {self.seat_number}"

    def accept(self, visitor: "TrainVisitor") -> Any:
        return visitor.visit_passenger(self)
