"""
Observable Values

Last-value state holders the list controller publishes through. A new
subscriber is called straight away with the current value, if any, and
then with every later value.
"""

import logging
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)

_UNSET = object()


class ObservableValue(Generic[T]):
    """Holds the latest published value and notifies subscribers on change"""

    def __init__(self, initial=_UNSET):
        self._value = initial
        self._observers: list[Callable[[T], None]] = []

    @property
    def has_value(self) -> bool:
        return self._value is not _UNSET

    @property
    def value(self) -> Optional[T]:
        """Current value, or None if nothing has been published yet"""
        return None if self._value is _UNSET else self._value

    def set(self, value: T) -> None:
        """Publish a value to every subscriber in subscription order"""
        self._value = value
        for observer in list(self._observers):
            self._notify(observer, value)

    def subscribe(self, observer: Callable[[T], None]) -> Callable[[], None]:
        """
        Attach an observer.

        Returns a callable that detaches it again.
        """
        self._observers.append(observer)
        if self.has_value:
            self._notify(observer, self._value)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def _notify(self, observer: Callable[[T], None], value: T) -> None:
        try:
            observer(value)
        except Exception as e:
            logger.error(f"Observer {observer!r} failed: {e}", exc_info=True)
