"""配置与日期工具测试"""

import re

import pytest

from train_management.utils import add_days, format_date, get_settings, get_today, validate_date


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DEFAULT_TRAIN_STATUS", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        settings = get_settings()

        assert settings.default_train_status == "On Time"
        assert settings.cargo_weight_unit == "tons"

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_TRAIN_STATUS", "Scheduled")

        assert get_settings().default_train_status == "Scheduled"


class TestDateUtils:
    def test_format_date(self):
        assert format_date("2024/01/05") == "2024-01-05"
        assert format_date("2024-01-05") == "2024-01-05"

    def test_format_date_invalid(self):
        with pytest.raises(ValueError):
            format_date("05.01.2024")

    def test_validate_date(self):
        assert validate_date("2024-02-29") is True
        assert validate_date("2023-02-29") is False
        assert validate_date("2024/02/01") is False

    def test_add_days(self):
        assert add_days("2024-12-30", 3) == "2025-01-02"

    def test_get_today(self):
        assert re.match(r"^\d{4}-\d{2}-\d{2}$", get_today("Asia/Almaty"))
        assert re.match(r"^\d{4}-\d{2}-\d{2}$", get_today("Not/AZone"))
