from typing import List, Optional


class SkinsError(Exception):
    """Base for all skins engine errors."""


class InvalidConfigurationError(SkinsError):
    """Course or game setup that cannot be scored. Carries every problem found."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors or [message]


class InvalidInputError(SkinsError):
    """A caller passed a value the engine cannot work with."""
