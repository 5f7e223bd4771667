"""按动力类型分派的列车能力表"""

import logging
from typing import Callable, Dict, List, NamedTuple, Optional

from ..models.base import PowerType
from ..models.train import Train

logger = logging.getLogger(__name__)

TrainAction = Callable[[Train], str]


class TrainCapabilities(NamedTuple):
    start: TrainAction
    stop: TrainAction
    maintain: Optional[TrainAction] = None


CAPABILITIES: Dict[PowerType, TrainCapabilities] = {
    PowerType.ELECTRIC: TrainCapabilities(
        start=lambda train: "Electric engine started.",
        stop=lambda train: "Electric engine stopped.",
        maintain=lambda train: "Performing maintenance on electric train.",
    ),
    PowerType.DIESEL: TrainCapabilities(
        start=lambda train: "Diesel engine started.",
        stop=lambda train: "Diesel engine stopped.",
        maintain=lambda train: "Performing maintenance on diesel train.",
    ),
    # 货运列车没有检修能力
    PowerType.CARGO: TrainCapabilities(
        start=lambda train: "Cargo train engine started.",
        stop=lambda train: "Cargo train engine stopped.",
    ),
}


def capabilities_for(train: Train) -> Optional[TrainCapabilities]:
    if train.power_type is None:
        logger.warning(f"列车 {train.train_id} 未设置动力类型")
        return None
    return CAPABILITIES.get(train.power_type)


def start_engine(train: Train) -> Optional[str]:
    capabilities = capabilities_for(train)
    return capabilities.start(train) if capabilities else None


def stop_engine(train: Train) -> Optional[str]:
    capabilities = capabilities_for(train)
    return capabilities.stop(train) if capabilities else None


def perform_maintenance(train: Train) -> Optional[str]:
    capabilities = capabilities_for(train)
    if capabilities is None or capabilities.maintain is None:
        logger.warning(f"列车 {train.train_id} 不支持检修操作")
        return None
    return capabilities.maintain(train)


class TrainController:
    """驱动一次行程的开始与结束"""

    def __init__(self, train: Train):
        self.train = train

    def start_journey(self) -> List[str]:
        lines = []
        started = start_engine(self.train)
        if started:
            lines.append(started)
        lines.append("Journey started.")
        return lines

    def end_journey(self) -> List[str]:
        lines = []
        stopped = stop_engine(self.train)
        if stopped:
            lines.append(stopped)
        lines.append("Journey ended.")
        return lines
