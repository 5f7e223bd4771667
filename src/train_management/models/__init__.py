"""数据模型包"""

from .base import PowerType, Visitable
from .memento import TrainMemento
from .train import Train, TrainListener
from .passenger import Passenger
from .station import Station
from .ticket import Ticket
from .maintenance import Maintenance

__all__ = [
    "PowerType",
    "Visitable",
    "TrainMemento",
    "Train",
    "TrainListener",
    "Passenger",
    "Station",
    "Ticket",
    "Maintenance",
]
