"""列车快照模型"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from .base import PowerType


class TrainMemento(BaseModel):
    """列车可变字段的不可变快照"""
    model_config = ConfigDict(frozen=True)

    train_id: str = Field(..., description="所属车次")
    power_type: Optional[PowerType] = Field(None, description="动力类型")
    departure_time: str = Field("", description="出发时间")
    arrival_time: str = Field("", description="到达时间")
    status: str = Field("", description="运行状态")
