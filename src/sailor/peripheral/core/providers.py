from abc import abstractmethod
from typing import Generic, TypeVar

import reactivex

T = TypeVar("T")


class ObservableProvider(Generic[T]):
    @abstractmethod
    def observable(self) -> reactivex.Observable[T]:
        raise NotImplementedError("")
