"""
Network Result

Tagged outcome value returned by every catalog operation that can fail.
Failures travel as data instead of being raised across the fetch boundary.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class ResultStatus(str, Enum):
    """Discriminator for NetworkResult"""
    SUCCESS = "success"
    ERROR = "error"
    EXCEPTION = "exception"


@dataclass(frozen=True)
class NetworkResult(Generic[T]):
    """
    Outcome of a network-backed operation.

    Exactly one variant is populated:
    - SUCCESS carries ``data``
    - ERROR carries ``message`` and an optional numeric ``code``
    - EXCEPTION carries the unclassified ``exception``

    Build values through the ``success``/``error``/``failure`` constructors.
    """
    status: ResultStatus
    data: Optional[T] = None
    message: Optional[str] = None
    code: Optional[int] = None
    exception: Optional[BaseException] = None

    def __post_init__(self):
        if self.status == ResultStatus.ERROR:
            if self.message is None:
                raise ValueError("Error result requires a message")
            if self.data is not None or self.exception is not None:
                raise ValueError("Error result cannot carry data or an exception")
        elif self.status == ResultStatus.EXCEPTION:
            if self.exception is None:
                raise ValueError("Exception result requires an exception")
            if self.data is not None or self.message is not None or self.code is not None:
                raise ValueError("Exception result cannot carry data, message or code")
        elif self.message is not None or self.code is not None or self.exception is not None:
            raise ValueError("Success result cannot carry error details")

    # ==================== Constructors ====================

    @classmethod
    def success(cls, data: T) -> "NetworkResult[T]":
        return cls(status=ResultStatus.SUCCESS, data=data)

    @classmethod
    def error(cls, message: str, code: Optional[int] = None) -> "NetworkResult[T]":
        return cls(status=ResultStatus.ERROR, message=message, code=code)

    @classmethod
    def failure(cls, exception: BaseException) -> "NetworkResult[T]":
        """Wrap an exception that could not be classified into a message"""
        return cls(status=ResultStatus.EXCEPTION, exception=exception)

    # ==================== Inspection ====================

    @property
    def is_success(self) -> bool:
        return self.status == ResultStatus.SUCCESS

    @property
    def is_error(self) -> bool:
        return self.status == ResultStatus.ERROR

    @property
    def is_exception(self) -> bool:
        return self.status == ResultStatus.EXCEPTION

    def fold(
        self,
        on_success: Callable[[T], R],
        on_error: Callable[[str, Optional[int]], R],
        on_exception: Callable[[BaseException], R],
    ) -> R:
        """Dispatch to the handler matching this variant and return its value"""
        if self.status == ResultStatus.SUCCESS:
            return on_success(self.data)
        if self.status == ResultStatus.ERROR:
            return on_error(self.message, self.code)
        return on_exception(self.exception)

    # ==================== Chaining ====================

    def on_success(self, action: Callable[[T], None]) -> "NetworkResult[T]":
        if self.is_success:
            action(self.data)
        return self

    def on_error(self, action: Callable[[str, Optional[int]], None]) -> "NetworkResult[T]":
        if self.is_error:
            action(self.message, self.code)
        return self

    def on_exception(self, action: Callable[[BaseException], None]) -> "NetworkResult[T]":
        if self.is_exception:
            action(self.exception)
        return self
