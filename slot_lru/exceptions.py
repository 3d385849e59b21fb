"""Custom exceptions for slot-lru."""

from typing import Hashable, Optional


class SlotLruError(Exception):
    """Base exception for all library errors.
    
    Attributes:
        message: Human-readable error description
        error_code: Optional error code for programmatic handling
    """
    
    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
    
    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class InvalidCapacityError(SlotLruError):
    """Store constructed with a capacity that is not a positive integer.
    
    Attributes:
        capacity: The rejected capacity value
    """
    
    def __init__(self, message: str, capacity: object = None):
        super().__init__(message, error_code="INVALID_CAPACITY")
        self.capacity = capacity


class NotFoundError(SlotLruError):
    """Key is not present in the store.
    
    Attributes:
        key: The key that was looked up
    """
    
    def __init__(self, message: str, key: Optional[Hashable] = None):
        super().__init__(message, error_code="NOT_FOUND")
        self.key = key


class ConfigurationError(SlotLruError):
    """Error in configuration or settings.
    
    Attributes:
        config_key: The configuration key that caused the error (if applicable)
    """
    
    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message, error_code="CONFIG_ERROR")
        self.config_key = config_key
