"""构建器与工厂测试"""

from train_management.models import Maintenance, Passenger, PowerType, Station, Train
from train_management.services import (
    CargoTrainBuilder,
    DefaultEntityFactory,
    DieselTrainBuilder,
    ElectricTrainBuilder,
    TrainBuilder,
    builder_for,
)


class TestTrainBuilder:
    def test_chained_build(self):
        train = (
            TrainBuilder()
            .train_id("E1")
            .train_type("electric")
            .departure_time("08:00")
            .arrival_time("09:00")
            .status("On Time")
            .build()
        )

        assert isinstance(train, Train)
        assert train.train_id == "E1"
        assert train.power_type == PowerType.ELECTRIC
        assert train.departure_time == "08:00"
        assert train.arrival_time == "09:00"
        assert train.status == "On Time"

    def test_omitted_fields_are_empty(self):
        train = TrainBuilder().train_id("X").build()

        assert train.power_type is None
        assert train.status == ""
        assert train.cargo_weight is None

    def test_subtype_builders_fix_power_type(self):
        assert ElectricTrainBuilder().build().power_type == PowerType.ELECTRIC
        assert DieselTrainBuilder().train_type("electric").build().power_type == PowerType.DIESEL

    def test_non_cargo_builders_drop_weight(self):
        electric = ElectricTrainBuilder().train_id("E1").cargo_weight(12).build()
        diesel = DieselTrainBuilder().train_id("D1").cargo_weight(8).build()

        assert electric.cargo_weight is None
        assert diesel.cargo_weight is None

    def test_cargo_builder_defaults_weight(self):
        train = CargoTrainBuilder().train_id("C1").build()

        assert train.power_type == PowerType.CARGO
        assert train.cargo_weight == 0.0

    def test_builder_for(self):
        assert isinstance(builder_for(PowerType.CARGO), CargoTrainBuilder)
        assert isinstance(builder_for(PowerType.DIESEL), DieselTrainBuilder)
        assert type(builder_for(None)) is TrainBuilder


class TestEntityFactory:
    def test_creates_entities(self):
        factory = DefaultEntityFactory()

        maintenance = factory.create_maintenance("2024-01-01", 180)
        passenger = factory.create_passenger("John Doe", "T123", "12A")
        station = factory.create_station("Central", "Astana")

        assert isinstance(maintenance, Maintenance)
        assert maintenance.service_interval_days == 180
        assert isinstance(passenger, Passenger)
        assert passenger.seat_number == "12A"
        assert isinstance(station, Station)
        assert station.location == "Astana"
