"""列车变更观察者"""

import logging
from abc import ABC, abstractmethod
from typing import List

logger = logging.getLogger(__name__)


class TrainObserver(ABC):
    """可直接注册到 Train.add_observer 的观察者"""

    @abstractmethod
    def update(self, message: str) -> None:
        pass

    def __call__(self, message: str) -> None:
        self.update(message)


class LoggingObserver(TrainObserver):
    def update(self, message: str) -> None:
        logger.info(f"🚆 {message}")


class DisplayBoardObserver(TrainObserver):
    """记录收到的所有变更，用于显示屏或乘客通知"""

    def __init__(self, name: str = "display-board"):
        self.name = name
        self.messages: List[str] = []

    def update(self, message: str) -> None:
        self.messages.append(message)

    @property
    def last_message(self) -> str:
        return self.messages[-1] if self.messages else ""
