"""
Base model for the MCP Jira Tempo API models.

Every upstream payload is converted through ``from_api_response`` so that
missing or null fields are replaced by defaults at the boundary.
"""

from typing import Any, TypeVar

from pydantic import BaseModel

# Type variable for the return type of from_api_response
T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """
    Base model for all API models with common conversion methods.
    """

    @classmethod
    def from_api_response(cls: type[T], data: dict[str, Any], **kwargs: Any) -> T:
        """
        Convert an API response to a model instance.

        Args:
            data: The API response data
            **kwargs: Additional context parameters

        Returns:
            An instance of the model

        Raises:
            NotImplementedError: If the subclass does not implement this method
        """
        raise NotImplementedError("Subclasses must implement from_api_response")

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert the model to a simplified dictionary."""
        return self.model_dump(exclude_none=True)


def as_int(value: Any, default: int = 0) -> int:
    """Coerce an upstream number (possibly a numeric string or None) to int."""
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        try:
            return int(float(value))
        except (TypeError, ValueError):
            return default


def as_str(value: Any, default: str = "") -> str:
    """Coerce an upstream scalar to str, mapping None to the default."""
    if value is None:
        return default
    return str(value)


def nested(data: dict[str, Any], *keys: str) -> Any:
    """Walk nested dictionaries, returning None when any level is missing."""
    current: Any = data
    for key in keys:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current
