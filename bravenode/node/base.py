"""Base class for agent tools and JSON-schema parameter checks."""

from abc import ABC, abstractmethod
from typing import Any

_TYPE_MAP: dict[str, type | tuple[type, ...]] = {
    "string": str,
    "integer": int,
    "number": (int, float),
    "boolean": bool,
    "array": list,
    "object": dict,
}


def validate_schema(value: Any, schema: dict[str, Any], path: str = "") -> list[str]:
    """Validate ``value`` against a JSON-schema subset and return error strings."""
    schema_type = schema.get("type")
    label = path or "parameter"

    if schema_type in _TYPE_MAP:
        expected = _TYPE_MAP[schema_type]
        bad_bool = schema_type in ("integer", "number") and isinstance(value, bool)
        if bad_bool or not isinstance(value, expected):
            return [f"{label} should be {schema_type}"]

    errors: list[str] = []
    if "enum" in schema and value not in schema["enum"]:
        errors.append(f"{label} must be one of {schema['enum']}")

    if schema_type in ("integer", "number"):
        if "minimum" in schema and value < schema["minimum"]:
            errors.append(f"{label} must be >= {schema['minimum']}")
        if "maximum" in schema and value > schema["maximum"]:
            errors.append(f"{label} must be <= {schema['maximum']}")

    if schema_type == "string":
        if "minLength" in schema and len(value) < schema["minLength"]:
            errors.append(f"{label} must be at least {schema['minLength']} chars")
        if "maxLength" in schema and len(value) > schema["maxLength"]:
            errors.append(f"{label} must be at most {schema['maxLength']} chars")

    if schema_type == "object":
        properties = schema.get("properties", {})
        for key in schema.get("required", []):
            if key not in value:
                errors.append(f"missing required {_join(path, key)}")
        for key, item in value.items():
            if key in properties:
                errors.extend(validate_schema(item, properties[key], _join(path, key)))

    if schema_type == "array" and "items" in schema:
        for i, item in enumerate(value):
            errors.extend(validate_schema(item, schema["items"], f"{path}[{i}]"))

    return errors


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


class Tool(ABC):
    """
    Abstract base class for agent tools.

    Tools expose a name, a description and a JSON schema for their
    parameters, and return a string result from ``execute``.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Tool name used in function calls."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Description of what the tool does."""

    @property
    @abstractmethod
    def parameters(self) -> dict[str, Any]:
        """JSON schema for tool parameters."""

    @abstractmethod
    async def execute(self, **kwargs: Any) -> str:
        """Execute the tool with given parameters."""

    def validate_params(self, params: dict[str, Any]) -> list[str]:
        """Validate tool parameters against the JSON schema. Returns error list."""
        schema = self.parameters or {}
        if schema.get("type", "object") != "object":
            raise ValueError(f"Schema must be object type, got {schema.get('type')!r}")
        return validate_schema(params, {**schema, "type": "object"})

    def to_schema(self) -> dict[str, Any]:
        """Convert tool to OpenAI function schema format."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters,
            },
        }
