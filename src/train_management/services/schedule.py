"""列车时刻表"""

import logging
from typing import List, Optional

from ..models.station import Station
from ..models.train import Train
from .iterator import TrainIterator

logger = logging.getLogger(__name__)


class Schedule:
    """保存列车和车站；车次标识不强制唯一，查找返回第一个匹配"""

    def __init__(self):
        self._trains: List[Train] = []
        self._stations: List[Station] = []

    def add_train(self, train: Train) -> None:
        self._trains.append(train)
        logger.info(f"添加列车 {train.train_id}，当前共 {len(self._trains)} 列")

    def remove_train(self, train_id: str) -> bool:
        train = self.find_train(train_id)
        if train is None:
            return False
        self._trains.remove(train)
        logger.info(f"移除列车 {train_id}")
        return True

    def find_train(self, train_id: str) -> Optional[Train]:
        for train in self._trains:
            if train.train_id == train_id:
                return train
        logger.warning(f"未找到列车: {train_id}")
        return None

    @property
    def trains(self) -> List[Train]:
        return list(self._trains)

    def iterator(self) -> TrainIterator:
        return TrainIterator(self._trains)

    def add_station(self, station: Station) -> None:
        self._stations.append(station)
        logger.info(f"添加车站 {station.name}")

    @property
    def stations(self) -> List[Station]:
        return list(self._stations)

    def __len__(self) -> int:
        return len(self._trains)
