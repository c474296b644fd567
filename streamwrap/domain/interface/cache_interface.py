from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Any


class CacheInterface(ABC):
    @abstractmethod
    def get(self, key: str, default: Any = None, hashed_key: bool = False) -> Any:
        pass

    @abstractmethod
    def set(
        self, key: str, data: Any, expiry_time: timedelta, hashed_key: bool = False
    ) -> None:
        pass
