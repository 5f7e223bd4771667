"""实体工厂"""

from abc import ABC, abstractmethod

from ..models.maintenance import Maintenance
from ..models.passenger import Passenger
from ..models.station import Station


class EntityFactory(ABC):
    @abstractmethod
    def create_maintenance(self, last_service_date: str, service_interval_days: int) -> Maintenance:
        pass

    @abstractmethod
    def create_passenger(self, name: str, ticket_number: str, seat_number: str) -> Passenger:
        pass

    @abstractmethod
    def create_station(self, name: str, location: str) -> Station:
        pass


class DefaultEntityFactory(EntityFactory):
    """直接转发到构造函数"""

    def create_maintenance(self, last_service_date: str, service_interval_days: int) -> Maintenance:
        return Maintenance(last_service_date=last_service_date, service_interval_days=service_interval_days)

    def create_passenger(self, name: str, ticket_number: str, seat_number: str) -> Passenger:
        return Passenger(name=name, ticket_number=ticket_number, seat_number=seat_number)

    def create_station(self, name: str, location: str) -> Station:
        return Station(name=name, location=location)
