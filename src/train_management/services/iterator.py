"""列车迭代器"""

from typing import Iterable, List, Optional

from ..models.train import Train


class TrainIterator:
    """单向、一次性的列车遍历器

    next() 越界返回 None；同时支持 for 循环，遍历完不能重新开始。
    """

    def __init__(self, trains: Iterable[Train]):
        self._trains: List[Train] = list(trains)
        self._position = 0

    def has_next(self) -> bool:
        return self._position < len(self._trains)

    def next(self) -> Optional[Train]:
        if not self.has_next():
            return None
        train = self._trains[self._position]
        self._position += 1
        return train

    def __iter__(self) -> "TrainIterator":
        return self

    def __next__(self) -> Train:
        train = self.next()
        if train is None:
            raise StopIteration
        return train
