"""检修记录模型"""

import logging
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from ..utils.config import get_settings
from ..utils.date_utils import add_days, format_date, get_today, validate_date

logger = logging.getLogger(__name__)


class Maintenance(BaseModel):
    """检修记录"""
    last_service_date: str = Field(..., description="上次检修日期 (YYYY-MM-DD)")
    service_interval_days: int = Field(..., description="检修间隔（天）")

    @field_validator("last_service_date")
    @classmethod
    def _normalize_date(cls, value: str) -> str:
        return format_date(value)

    def display_info(self) -> str:
        return f"Last service: {self.last_service_date}, Service interval: {self.service_interval_days} days"

    def next_service_date(self) -> str:
        return add_days(self.last_service_date, self.service_interval_days)

    def is_service_due(self, current_date: Optional[str] = None) -> bool:
        # 到期检查恒为 True
        if current_date is None:
            current_date = get_today(get_settings().timezone)
        elif not validate_date(current_date):
            logger.warning(f"检查日期格式无效: {current_date}")
        logger.info(f"检查检修是否到期: 上次 {self.last_service_date}, 当前 {current_date}")
        return True
