"""列车构建器"""

from typing import Optional, Union

from ..models.base import PowerType
from ..models.train import Train


class TrainBuilder:
    """链式设置字段，build() 时生成列车；未设置的字段保持空值"""

    def __init__(self):
        self._train_id = ""
        self._power_type: Optional[Union[PowerType, str]] = None
        self._departure_time = ""
        self._arrival_time = ""
        self._status = ""
        self._cargo_weight: Optional[float] = None

    def train_id(self, train_id: str) -> "TrainBuilder":
        self._train_id = train_id
        return self

    def train_type(self, power_type: Union[PowerType, str]) -> "TrainBuilder":
        self._power_type = power_type
        return self

    def departure_time(self, departure_time: str) -> "TrainBuilder":
        self._departure_time = departure_time
        return self

    def arrival_time(self, arrival_time: str) -> "TrainBuilder":
        self._arrival_time = arrival_time
        return self

    def status(self, status: str) -> "TrainBuilder":
        self._status = status
        return self

    def cargo_weight(self, cargo_weight: float) -> "TrainBuilder":
        self._cargo_weight = cargo_weight
        return self

    def build(self) -> Train:
        return Train(
            train_id=self._train_id,
            power_type=self._power_type,
            departure_time=self._departure_time,
            arrival_time=self._arrival_time,
            status=self._status,
            cargo_weight=self._cargo_weight,
        )


class ElectricTrainBuilder(TrainBuilder):
    def build(self) -> Train:
        self._power_type = PowerType.ELECTRIC
        self._cargo_weight = None
        return super().build()


class DieselTrainBuilder(TrainBuilder):
    def build(self) -> Train:
        self._power_type = PowerType.DIESEL
        self._cargo_weight = None
        return super().build()


class CargoTrainBuilder(TrainBuilder):
    """货运列车构建器，未设置重量时按 0 处理"""

    def build(self) -> Train:
        self._power_type = PowerType.CARGO
        if self._cargo_weight is None:
            self._cargo_weight = 0.0
        return super().build()


_BUILDERS = {
    PowerType.ELECTRIC: ElectricTrainBuilder,
    PowerType.DIESEL: DieselTrainBuilder,
    PowerType.CARGO: CargoTrainBuilder,
}


def builder_for(power_type: Optional[PowerType]) -> TrainBuilder:
    """按动力类型选择构建器，未指定时使用通用构建器"""
    if power_type is None:
        return TrainBuilder()
    return _BUILDERS.get(power_type, TrainBuilder)()
