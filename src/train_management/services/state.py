"""列车运行状态

状态本身只是枚举值；下一状态由 transition() 计算，
每个状态的动作由 STATE_ACTIONS 描述，两者互不依赖。
"""

import logging
from enum import Enum
from typing import Dict, Union

logger = logging.getLogger(__name__)


class TrainState(str, Enum):
    RUNNING = "running"
    STOPPED = "stopped"
    MAINTENANCE = "maintenance"


STATE_ACTIONS: Dict[TrainState, str] = {
    TrainState.RUNNING: "Train {train_id} is running.",
    TrainState.STOPPED: "Train {train_id} is stopped.",
    TrainState.MAINTENANCE: "Train {train_id} is under maintenance.",
}


def transition(current: TrainState, requested: Union[TrainState, str]) -> TrainState:
    """计算新状态：外部请求的任何状态都被接受，没有终止状态"""
    new_state = TrainState(requested)
    if new_state != current:
        logger.info(f"状态切换: {current.value} -> {new_state.value}")
    return new_state


def describe_state(state: TrainState, train_id: str) -> str:
    return STATE_ACTIONS[state].format(train_id=train_id)


class TrainContext:
    """单列车的状态上下文，初始为 STOPPED"""

    def __init__(self, train_id: str):
        self.train_id = train_id
        self.state = TrainState.STOPPED

    def request(self, requested: Union[TrainState, str]) -> str:
        self.state = transition(self.state, requested)
        return describe_state(self.state, self.train_id)

    def describe(self) -> str:
        return describe_state(self.state, self.train_id)
