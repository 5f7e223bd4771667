"""车票数据模型"""

import logging
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class Ticket(BaseModel):
    """车票信息模型

    状态只有两种：未预订 -> 已预订 -> 未预订。
    改座只在已预订时允许，且不改变预订状态。
    """
    model_config = ConfigDict(validate_assignment=True)

    ticket_id: str = Field(..., description="车票号")
    passenger_name: str = Field(..., description="乘客姓名")
    seat_number: str = Field(..., description="座位号")
    booked: bool = Field(False, description="是否已预订")

    def book(self) -> str:
        if self.booked:
            logger.warning(f"车票 {self.ticket_id} 重复预订")
            return f"Ticket {self.ticket_id} is already booked."
        self.booked = True
        logger.info(f"车票 {self.ticket_id} 预订成功")
        return f"Ticket {self.ticket_id} booked for {self.passenger_name}, seat {self.seat_number}."

    def cancel(self) -> str:
        if not self.booked:
            logger.warning(f"车票 {self.ticket_id} 未预订，无法取消")
            return f"Ticket {self.ticket_id} is not booked."
        self.booked = False
        logger.info(f"车票 {self.ticket_id} 已取消")
        return f"Ticket {self.ticket_id} cancelled."

    def modify(self, new_seat: str) -> str:
        if not self.booked:
            logger.warning(f"车票 {self.ticket_id} 未预订，无法改座")
            return f"Ticket {self.ticket_id} is not booked; seat unchanged."
        self.seat_number = new_seat
        logger.info(f"车票 {self.ticket_id} 改座为 {new_seat}")
        return f"Ticket {self.ticket_id} seat changed to {new_seat}."

    def display_info(self) -> str:
        state = "booked" if self.booked else "not booked"
        return f"Ticket: {self.ticket_id}, Passenger: {self.passenger_name}, Seat: {self.seat_number} ({state})"
