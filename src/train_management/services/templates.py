"""列车运营与检修的模板方法

manage_operation 和 perform_service 的步骤顺序固定，
子类只覆盖各自的两个钩子步骤。
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from ..models.base import PowerType
from ..models.train import Train
from .capabilities import CAPABILITIES


class OperationTemplate(ABC):
    def manage_operation(self, train: Train) -> List[str]:
        return [
            self.check_schedule(train),
            self.start_operation(train),
            self.perform_operation(train),
            self.end_operation(train),
        ]

    def check_schedule(self, train: Train) -> str:
        return (
            f"Checking schedule for train {train.train_id}: "
            f"departs {train.departure_time or 'n/a'}, arrives {train.arrival_time or 'n/a'}."
        )

    def perform_operation(self, train: Train) -> str:
        return f"Train {train.train_id} is operating on its route."

    @abstractmethod
    def start_operation(self, train: Train) -> str:
        pass

    @abstractmethod
    def end_operation(self, train: Train) -> str:
        pass


class ElectricTrainOperation(OperationTemplate):
    def start_operation(self, train: Train) -> str:
        return CAPABILITIES[PowerType.ELECTRIC].start(train)

    def end_operation(self, train: Train) -> str:
        return CAPABILITIES[PowerType.ELECTRIC].stop(train)


class DieselTrainOperation(OperationTemplate):
    def start_operation(self, train: Train) -> str:
        return CAPABILITIES[PowerType.DIESEL].start(train)

    def end_operation(self, train: Train) -> str:
        return CAPABILITIES[PowerType.DIESEL].stop(train)


class CargoTrainOperation(OperationTemplate):
    def start_operation(self, train: Train) -> str:
        return CAPABILITIES[PowerType.CARGO].start(train)

    def end_operation(self, train: Train) -> str:
        return CAPABILITIES[PowerType.CARGO].stop(train)


class ServiceTemplate(ABC):
    def perform_service(self, train: Train) -> List[str]:
        return [
            self.check_systems(train),
            self.clean(train),
            self.refuel_or_recharge(train),
            self.test_run(train),
        ]

    def check_systems(self, train: Train) -> str:
        return f"Checking systems of train {train.train_id}."

    def clean(self, train: Train) -> str:
        return f"Cleaning train {train.train_id}."

    @abstractmethod
    def refuel_or_recharge(self, train: Train) -> str:
        pass

    @abstractmethod
    def test_run(self, train: Train) -> str:
        pass


class ElectricTrainService(ServiceTemplate):
    def refuel_or_recharge(self, train: Train) -> str:
        return f"Recharging batteries of train {train.train_id}."

    def test_run(self, train: Train) -> str:
        return f"Test run of electric train {train.train_id} completed."


class DieselTrainService(ServiceTemplate):
    def refuel_or_recharge(self, train: Train) -> str:
        return f"Refueling diesel tanks of train {train.train_id}."

    def test_run(self, train: Train) -> str:
        return f"Test run of diesel train {train.train_id} completed."


_OPERATIONS: Dict[PowerType, OperationTemplate] = {
    PowerType.ELECTRIC: ElectricTrainOperation(),
    PowerType.DIESEL: DieselTrainOperation(),
    PowerType.CARGO: CargoTrainOperation(),
}

_SERVICES: Dict[PowerType, ServiceTemplate] = {
    PowerType.ELECTRIC: ElectricTrainService(),
    PowerType.DIESEL: DieselTrainService(),
}


def operation_template_for(power_type: Optional[PowerType]) -> Optional[OperationTemplate]:
    return _OPERATIONS.get(power_type) if power_type else None


def service_template_for(power_type: Optional[PowerType]) -> Optional[ServiceTemplate]:
    return _SERVICES.get(power_type) if power_type else None
