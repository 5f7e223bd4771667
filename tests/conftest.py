"""全局 pytest 配置与夹具"""

import pytest

from train_management.models import Passenger, Station, Ticket
from train_management.services import (
    CargoTrainBuilder,
    DieselTrainBuilder,
    ElectricTrainBuilder,
    TrainManager,
)
from train_management.services import train_manager as train_manager_module
from train_management.utils import config as config_module


@pytest.fixture(autouse=True)
def reset_globals():
    """每个用例使用全新的配置与管理器实例"""
    config_module._settings = None
    train_manager_module._manager = None
    yield
    config_module._settings = None
    train_manager_module._manager = None


@pytest.fixture
def electric_train():
    return (
        ElectricTrainBuilder()
        .train_id("E123")
        .departure_time("10:00")
        .arrival_time("12:30")
        .status("On Time")
        .build()
    )


@pytest.fixture
def diesel_train():
    return (
        DieselTrainBuilder()
        .train_id("D456")
        .departure_time("12:00")
        .arrival_time("15:00")
        .status("Delayed")
        .build()
    )


@pytest.fixture
def cargo_train():
    return (
        CargoTrainBuilder()
        .train_id("C789")
        .departure_time("14:00")
        .cargo_weight(50)
        .build()
    )


@pytest.fixture
def ticket():
    return Ticket(ticket_id="T123", passenger_name="John Doe", seat_number="12A")


@pytest.fixture
def passenger():
    return Passenger(name="John Doe", ticket_number="T123", seat_number="12A")


@pytest.fixture
def station():
    return Station(name="Central", location="Astana")


@pytest.fixture
def manager():
    return TrainManager()
