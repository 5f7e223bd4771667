"""列车状态测试"""

import pytest

from train_management.services import TrainContext, TrainState, transition


class TestTrainState:
    def test_default_is_stopped(self):
        assert TrainContext("E123").state == TrainState.STOPPED

    def test_sequence_ends_in_last_requested(self):
        context = TrainContext("E123")

        context.request(TrainState.RUNNING)
        context.request(TrainState.STOPPED)
        message = context.request(TrainState.MAINTENANCE)

        assert context.state == TrainState.MAINTENANCE
        assert message == "Train E123 is under maintenance."

    def test_request_accepts_value(self):
        context = TrainContext("E123")

        assert context.request("running") == "Train E123 is running."
        assert context.state == TrainState.RUNNING

    def test_transition_returns_requested(self):
        for current in TrainState:
            for requested in TrainState:
                assert transition(current, requested) == requested

    def test_unknown_state_rejected(self):
        with pytest.raises(ValueError):
            transition(TrainState.STOPPED, "flying")

    def test_describe(self):
        assert TrainContext("D1").describe() == "Train D1 is stopped."
