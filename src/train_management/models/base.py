"""模型公共定义"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from ..services.visitor import TrainVisitor


class PowerType(str, Enum):
    """列车动力类型"""
    ELECTRIC = "electric"
    DIESEL = "diesel"
    CARGO = "cargo"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Visitable(ABC):
    """可被访问者检查的实体"""

    @abstractmethod
    def accept(self, visitor: "TrainVisitor") -> Any:
        """把自身交给访问者对应的方法"""
