"""
Shared data models for attribute controllers.
"""

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Domains of associated items fetched together with attributes by default
DEFAULT_DOMAINS: Tuple[str, ...] = ("media", "price", "text")


class AttributeItem(BaseModel):
    """Single product attribute like a color or a size."""

    id: str
    code: str
    type: str = "product"
    domain: str = "product"
    label: str = ""
    status: int = 1
    position: int = 0
    refs: Dict[str, List[Any]] = Field(default_factory=dict)  # Associated items by domain


class SearchResult(BaseModel):
    """Ordered attribute items plus the total number of matches before slicing."""

    items: List[Any] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)


class DecoratorConfig(BaseModel):
    """Names of the decorators wrapped around an attribute controller."""

    model_config = ConfigDict(populate_by_name=True)

    default: List[str] = Field(default_factory=list)
    excludes: List[str] = Field(default_factory=list)
    global_: List[str] = Field(default_factory=list, alias="global")
    local: List[str] = Field(default_factory=list)

    @field_validator("default", "excludes", "global_", "local", mode="before")
    @classmethod
    def split_names(cls, value: Any) -> Any:
        """Accept comma separated strings as used in environment variables."""
        if value is None:
            return []
        if isinstance(value, str):
            return [name.strip() for name in value.split(",") if name.strip()]
        return value

    @field_validator("default", "excludes", "global_", "local")
    @classmethod
    def validate_names(cls, names: List[str]) -> List[str]:
        """Decorator names must be plain alphanumeric identifiers."""
        invalid = [name for name in names if not name.isalnum()]
        if invalid:
            raise ValueError(f"Invalid decorator names: {invalid}")
        return names

    def decorator_names(self, local: Optional[List[str]] = None) -> List[str]:
        """
        Return all decorator names in wrapping order (innermost first).

        Args:
            local: Additional local decorators appended last

        Returns:
            Default decorators without excluded ones, then global and local ones
        """
        names = [name for name in self.default if name not in self.excludes]
        return names + self.global_ + self.local + list(local or [])
