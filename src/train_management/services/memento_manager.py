"""列车快照管理"""

import logging
from collections import defaultdict
from typing import Dict, List, Optional, Tuple

from ..models.memento import TrainMemento
from ..models.train import Train

logger = logging.getLogger(__name__)


class MementoManager:
    """按车次保存快照列表，下标 0 为最早保存的快照"""

    def __init__(self):
        self._history: Dict[str, List[TrainMemento]] = defaultdict(list)

    def save_memento(self, train: Train) -> TrainMemento:
        memento = train.save_state()
        self._history[train.train_id].append(memento)
        logger.info(f"保存列车 {train.train_id} 快照 #{len(self._history[train.train_id]) - 1}")
        return memento

    def get_memento(self, train_id: str, index: int) -> Optional[TrainMemento]:
        snapshots = self._history.get(train_id, [])
        if 0 <= index < len(snapshots):
            return snapshots[index]
        logger.warning(f"列车 {train_id} 没有下标为 {index} 的快照")
        return None

    def get_latest_memento(self, train_id: str) -> Optional[TrainMemento]:
        snapshots = self._history.get(train_id, [])
        if not snapshots:
            logger.warning(f"列车 {train_id} 没有任何快照")
            return None
        return snapshots[-1]

    def history(self, train_id: str) -> Tuple[TrainMemento, ...]:
        return tuple(self._history.get(train_id, []))

    def restore(self, train: Train, index: Optional[int] = None) -> bool:
        """恢复快照；不传下标时恢复最近一次"""
        if index is None:
            memento = self.get_latest_memento(train.train_id)
        else:
            memento = self.get_memento(train.train_id, index)
        if memento is None:
            return False
        train.restore_state(memento)
        return True
