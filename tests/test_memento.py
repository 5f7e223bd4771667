"""列车快照测试"""

import pytest
from pydantic import ValidationError

from train_management.models import PowerType
from train_management.services import MementoManager


class TestMementoManager:
    def test_save_mutate_restore_first(self, electric_train):
        mementos = MementoManager()
        mementos.save_memento(electric_train)

        electric_train.set_departure_time("11:00")
        electric_train.set_arrival_time("14:00")
        electric_train.set_status("Delayed")

        assert mementos.restore(electric_train, 0) is True
        assert electric_train.train_id == "E123"
        assert electric_train.power_type == PowerType.ELECTRIC
        assert electric_train.departure_time == "10:00"
        assert electric_train.arrival_time == "12:30"
        assert electric_train.status == "On Time"

    def test_index_zero_is_oldest(self, electric_train):
        mementos = MementoManager()
        mementos.save_memento(electric_train)
        electric_train.set_status("Delayed")
        mementos.save_memento(electric_train)

        assert mementos.get_memento("E123", 0).status == "On Time"
        assert mementos.get_memento("E123", 1).status == "Delayed"
        assert mementos.get_latest_memento("E123").status == "Delayed"
        assert len(mementos.history("E123")) == 2

    def test_out_of_range_returns_none(self, electric_train):
        mementos = MementoManager()
        mementos.save_memento(electric_train)

        assert mementos.get_memento("E123", 1) is None
        assert mementos.get_memento("E123", -1) is None
        assert mementos.get_memento("NOPE", 0) is None
        assert mementos.get_latest_memento("NOPE") is None

    def test_restore_missing_leaves_train(self, electric_train):
        mementos = MementoManager()

        assert mementos.restore(electric_train) is False
        assert mementos.restore(electric_train, 3) is False
        assert electric_train.status == "On Time"

    def test_restore_latest_by_default(self, electric_train):
        mementos = MementoManager()
        mementos.save_memento(electric_train)
        electric_train.set_status("Delayed")
        mementos.save_memento(electric_train)
        electric_train.set_status("Arrived")

        assert mementos.restore(electric_train) is True
        assert electric_train.status == "Delayed"

    def test_restore_completes_before_observers_run(self, electric_train):
        mementos = MementoManager()
        mementos.save_memento(electric_train)
        electric_train.set_departure_time("11:00")
        electric_train.set_arrival_time("14:00")
        electric_train.set_status("Delayed")
        seen = []

        def failing_observer(message):
            seen.append((electric_train.departure_time, electric_train.arrival_time, electric_train.status))
            raise RuntimeError("display offline")

        electric_train.add_observer(failing_observer)

        with pytest.raises(RuntimeError):
            mementos.restore(electric_train, 0)

        assert seen == [("10:00", "12:30", "On Time")]
        assert electric_train.departure_time == "10:00"
        assert electric_train.arrival_time == "12:30"
        assert electric_train.status == "On Time"

    def test_restore_notifies_each_field(self, electric_train):
        mementos = MementoManager()
        mementos.save_memento(electric_train)
        received = []
        electric_train.add_observer(received.append)

        mementos.restore(electric_train)

        assert received == [
            "Train E123 departure time changed to 10:00",
            "Train E123 arrival time changed to 12:30",
            "Train E123 status changed to On Time",
        ]

    def test_memento_is_immutable(self, electric_train):
        memento = electric_train.save_state()

        with pytest.raises(ValidationError):
            memento.status = "Changed"
