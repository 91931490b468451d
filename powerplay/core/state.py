"""List screen state published by the product list controller"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class UiStatus(str, Enum):
    """Top-level state of the list screen"""
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class UiState(Generic[T]):
    """Loading, Success(data) or Error(message)"""
    status: UiStatus
    data: Optional[T] = None
    message: Optional[str] = None

    @classmethod
    def loading(cls) -> "UiState[T]":
        return cls(status=UiStatus.LOADING)

    @classmethod
    def success(cls, data: T) -> "UiState[T]":
        return cls(status=UiStatus.SUCCESS, data=data)

    @classmethod
    def error(cls, message: str) -> "UiState[T]":
        return cls(status=UiStatus.ERROR, message=message)

    @property
    def is_loading(self) -> bool:
        return self.status == UiStatus.LOADING

    @property
    def is_success(self) -> bool:
        return self.status == UiStatus.SUCCESS

    @property
    def is_error(self) -> bool:
        return self.status == UiStatus.ERROR


@dataclass(frozen=True)
class PaginationState:
    """Infinite-scroll bookkeeping"""
    current_page: int = 0
    has_next_page: bool = True
    is_loading_next_page: bool = False
    total_pages: int = 0
