from abc import ABC, abstractmethod
from typing import List, Any


# ──────────────────────────────────────────────────────────────────────────────
# EXCEPTIONS
# ──────────────────────────────────────────────────────────────────────────────
class ConfigurationError(Exception):
    """Raised when conversion options or mapping overlays are malformed."""
    def __init__(self, option: str, reason: str):
        super().__init__(f"Invalid configuration for '{option}': {reason}")
        self.option = option
        self.reason = reason

class MappingConfigError(ConfigurationError):
    """Raised when a romaji→kana mapping entry cannot be inserted into a tree."""
    def __init__(self, sequence: Any, reason: str, option: str = "customKanaMapping"):
        super().__init__(option, f"entry {sequence!r} {reason}")
        self.sequence = sequence


class BaseTokenizer(ABC):
    """Abstract base class for romaji tokenization"""

    @abstractmethod
    def tokenize(self, text: str) -> List[Any]:
        """Split text into spans of (start, end, value)"""
        pass
