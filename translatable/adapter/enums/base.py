from enum import Enum


class BaseAdapterActionEnum(str, Enum):
    def __str__(self) -> str:
        return self.value
