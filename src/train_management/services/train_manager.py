"""列车管理器"""

import logging
from typing import Dict, List, Optional, Union

from ..models.ticket import Ticket
from ..models.train import Train
from .capabilities import TrainController, perform_maintenance
from .memento_manager import MementoManager
from .schedule import Schedule
from .state import TrainContext, TrainState

logger = logging.getLogger(__name__)


class TrainManager:
    """集中持有时刻表、车票、快照和状态上下文

    显式构造并传递给使用方；需要进程内唯一实例时通过 get_train_manager() 获取。
    """

    def __init__(self, schedule: Optional[Schedule] = None,
                 mementos: Optional[MementoManager] = None):
        self.schedule = schedule or Schedule()
        self.mementos = mementos or MementoManager()
        self.tickets: Dict[str, Ticket] = {}
        self._contexts: Dict[str, TrainContext] = {}

    def manage_train(self, train: Train) -> str:
        message = f"Managing train {train.train_id}: {train.display_info()}"
        logger.info(message)
        return message

    def register_ticket(self, ticket: Ticket) -> Ticket:
        """同一车票号已存在时返回已有车票"""
        return self.tickets.setdefault(ticket.ticket_id, ticket)

    def get_ticket(self, ticket_id: str) -> Optional[Ticket]:
        ticket = self.tickets.get(ticket_id)
        if ticket is None:
            logger.warning(f"未找到车票: {ticket_id}")
        return ticket

    def context_for(self, train_id: str) -> TrainContext:
        if train_id not in self._contexts:
            self._contexts[train_id] = TrainContext(train_id)
        return self._contexts[train_id]

    def change_state(self, train: Train, requested: Union[TrainState, str]) -> List[str]:
        """切换状态并执行该状态对应的列车动作"""
        context = self.context_for(train.train_id)
        previous = context.state
        lines = [context.request(requested)]
        controller = TrainController(train)
        if context.state == previous:
            return lines
        if context.state == TrainState.RUNNING:
            lines.extend(controller.start_journey())
        elif context.state == TrainState.MAINTENANCE:
            if previous == TrainState.RUNNING:
                lines.extend(controller.end_journey())
            maintained = perform_maintenance(train)
            lines.append(maintained or f"Train {train.train_id} does not support maintenance.")
        elif previous == TrainState.RUNNING:
            lines.extend(controller.end_journey())
        return lines


_manager: Optional[TrainManager] = None


def get_train_manager() -> TrainManager:
    """获取进程内唯一的管理器，首次访问时创建"""
    global _manager
    if _manager is None:
        _manager = TrainManager()
        logger.info("创建列车管理器实例")
    return _manager
