# Core modules

from .config import Settings, get_settings, settings
from .logging_config import configure_logging
from .observable import ObservableValue
from .state import PaginationState, UiState, UiStatus

__all__ = [
    "Settings",
    "get_settings",
    "settings",
    "configure_logging",
    "ObservableValue",
    "PaginationState",
    "UiState",
    "UiStatus",
]
