"""实体检查访问者"""

import logging
from abc import ABC, abstractmethod

from ..models.passenger import Passenger
from ..models.station import Station
from ..models.train import Train

logger = logging.getLogger(__name__)


class TrainVisitor(ABC):
    @abstractmethod
    def visit_train(self, train: Train):
        pass

    @abstractmethod
    def visit_passenger(self, passenger: Passenger):
        pass

    @abstractmethod
    def visit_station(self, station: Station):
        pass


class InspectionVisitor(TrainVisitor):
    """每个实体输出一行检查信息"""

    def visit_train(self, train: Train) -> str:
        message = f"Inspecting train {train.train_id} ({train.type_label or 'unknown type'}), status: {train.status or 'n/a'}."
        logger.info(message)
        return message

    def visit_passenger(self, passenger: Passenger) -> str:
        message = f"Inspecting passenger {passenger.name} with ticket {passenger.ticket_number}, seat {passenger.seat_number}."
        logger.info(message)
        return message

    def visit_station(self, station: Station) -> str:
        message = f"Inspecting station {station.name} at {station.location}."
        logger.info(message)
        return message
