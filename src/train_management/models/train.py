"""列车数据模型"""

import logging
from typing import Any, Callable, List, Optional, TYPE_CHECKING
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from .base import PowerType, Visitable
from .memento import TrainMemento

if TYPE_CHECKING:
    from ..services.visitor import TrainVisitor

logger = logging.getLogger(__name__)

TrainListener = Callable[[str], None]


class Train(BaseModel, Visitable):
    """列车信息模型

    字段只通过 set_* 方法修改，修改后按注册顺序通知所有监听者。
    货运列车额外携带 cargo_weight。
    """
    model_config = ConfigDict(frozen=True)

    train_id: str = Field("", description="车次标识")
    power_type: Optional[PowerType] = Field(None, description="动力类型")
    departure_time: str = Field("", description="出发时间")
    arrival_time: str = Field("", description="到达时间")
    status: str = Field("", description="运行状态，如 On Time / Delayed / Arrived")
    cargo_weight: Optional[float] = Field(None, ge=0, description="货运重量")

    _observers: List[TrainListener] = PrivateAttr(default_factory=list)

    @field_validator("power_type", mode="before")
    @classmethod
    def _normalize_power_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip().lower()
            return value or None
        return value

    # 观察者

    def add_observer(self, observer: TrainListener) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: TrainListener) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    @property
    def observers(self) -> List[TrainListener]:
        return list(self._observers)

    def notify_observers(self, message: str) -> None:
        for observer in list(self._observers):
            observer(message)

    # 带通知的修改

    def _write(self, **values: Any) -> None:
        # 模型冻结，只有 set_* 和 restore_state 可以写字段
        for name, value in values.items():
            object.__setattr__(self, name, value)

    def set_departure_time(self, departure_time: str) -> None:
        self._write(departure_time=departure_time)
        self.notify_observers(f"Train {self.train_id} departure time changed to {departure_time}")

    def set_arrival_time(self, arrival_time: str) -> None:
        self._write(arrival_time=arrival_time)
        self.notify_observers(f"Train {self.train_id} arrival time changed to {arrival_time}")

    def set_status(self, status: str) -> None:
        self._write(status=status)
        self.notify_observers(f"Train {self.train_id} status changed to {status}")

    # 备忘录

    def save_state(self) -> TrainMemento:
        """生成当前可变字段的快照"""
        return TrainMemento(
            train_id=self.train_id,
            power_type=self.power_type,
            departure_time=self.departure_time,
            arrival_time=self.arrival_time,
            status=self.status,
        )

    def restore_state(self, memento: TrainMemento) -> None:
        """从快照恢复，车次标识保持不变"""
        self._write(
            power_type=memento.power_type,
            departure_time=memento.departure_time,
            arrival_time=memento.arrival_time,
            status=memento.status,
        )
        self.notify_observers(f"Train {self.train_id} departure time changed to {self.departure_time}")
        self.notify_observers(f"Train {self.train_id} arrival time changed to {self.arrival_time}")
        self.notify_observers(f"Train {self.train_id} status changed to {self.status}")
        logger.info(f"列车 {self.train_id} 已恢复到快照状态")

    def clone(self, train_id: Optional[str] = None) -> "Train":
        """复制一份字段相同的新列车，不复制监听者"""
        data = self.model_dump()
        if train_id is not None:
            data["train_id"] = train_id
        return Train.model_validate(data)

    @property
    def type_label(self) -> str:
        return self.power_type.label if self.power_type else ""

    @property
    def is_cargo(self) -> bool:
        return self.power_type == PowerType.CARGO

    def display_info(self) -> str:
        return (
            f"Train ID: {self.train_id}, Type: {self.type_label}, "
            f"Departure: {self.departure_time}, Arrival: {self.arrival_time}, "
            f"Status: {self.status}"
        )

    def display_cargo_info(self, unit: str = "tons") -> Optional[str]:
        if not self.is_cargo:
            return None
        return f"Cargo weight: {self.cargo_weight or 0.0} {unit}"

    def accept(self, visitor: "TrainVisitor") -> Any:
        return visitor.visit_train(self)
