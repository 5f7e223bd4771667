"""列车观察者测试"""

import logging

from train_management.services import DisplayBoardObserver, LoggingObserver


class TestTrainObservers:
    def test_two_observers_notified_once(self, electric_train):
        first = DisplayBoardObserver("platform-1")
        second = DisplayBoardObserver("platform-2")
        electric_train.add_observer(first)
        electric_train.add_observer(second)

        electric_train.set_status("X")

        assert len(first.messages) == 1
        assert len(second.messages) == 1
        assert "X" in first.messages[0]
        assert "X" in second.messages[0]

    def test_mutate_then_notify(self, electric_train):
        seen = []
        electric_train.add_observer(lambda message: seen.append(electric_train.departure_time))

        electric_train.set_departure_time("11:15")

        assert seen == ["11:15"]

    def test_registration_order(self, electric_train):
        calls = []
        electric_train.add_observer(lambda message: calls.append("a"))
        electric_train.add_observer(lambda message: calls.append("b"))

        electric_train.set_arrival_time("13:00")

        assert calls == ["a", "b"]

    def test_each_setter_notifies(self, electric_train):
        board = DisplayBoardObserver()
        electric_train.add_observer(board)

        electric_train.set_departure_time("10:05")
        electric_train.set_arrival_time("12:35")
        electric_train.set_status("Delayed")

        assert board.messages == [
            "Train E123 departure time changed to 10:05",
            "Train E123 arrival time changed to 12:35",
            "Train E123 status changed to Delayed",
        ]
        assert board.last_message.endswith("Delayed")

    def test_remove_observer(self, electric_train):
        board = DisplayBoardObserver()
        electric_train.add_observer(board)
        electric_train.remove_observer(board)

        electric_train.set_status("Arrived")

        assert board.messages == []
        assert electric_train.observers == []

    def test_logging_observer(self, electric_train, caplog):
        electric_train.add_observer(LoggingObserver())

        with caplog.at_level(logging.INFO):
            electric_train.set_status("Arrived")

        assert "Train E123 status changed to Arrived" in caplog.text
