"""车票命令"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from ..models.ticket import Ticket

logger = logging.getLogger(__name__)


class TicketCommand(ABC):
    def __init__(self, ticket: Ticket):
        self.ticket = ticket

    @abstractmethod
    def execute(self) -> str:
        pass


class BookTicketCommand(TicketCommand):
    def execute(self) -> str:
        return self.ticket.book()


class CancelTicketCommand(TicketCommand):
    def execute(self) -> str:
        return self.ticket.cancel()


class ModifyTicketCommand(TicketCommand):
    def __init__(self, ticket: Ticket, new_seat: str):
        super().__init__(ticket)
        self.new_seat = new_seat

    def execute(self) -> str:
        return self.ticket.modify(self.new_seat)


class TicketManager:
    """只保存一条命令的调用者，不排队也不撤销"""

    def __init__(self):
        self._command: Optional[TicketCommand] = None

    def set_command(self, command: TicketCommand) -> None:
        self._command = command

    def execute_command(self) -> Optional[str]:
        if self._command is None:
            logger.warning("没有待执行的车票命令")
            return None
        logger.info(f"执行命令 {type(self._command).__name__} - 车票 {self._command.ticket.ticket_id}")
        return self._command.execute()
