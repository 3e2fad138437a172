"""Standard schema validators for dataknobs.

This package provides small, composable runtime validators that follow the
standard schema contract: every schema exposes ``version``, ``vendor`` and a
synchronous ``validate(value)`` returning a ``Result`` that holds either a
value or a list of issues.

- Primitive schemas: boolean, number, integer, string, date, instance_of
- Composite schemas: array, strict_object, nullable
- A single ``parse`` entry point that rejects asynchronous validators
- A configuration-driven ``SchemaFactory``

Example:
    ```python
    from dataknobs_schema import array, integer, parse, strict_object, string

    point = strict_object({"label": string(min=1), "coords": array(integer())})
    result = parse(point, {"label": "a", "coords": [1, "2"]})
    result.issues
    # (Issue(message='must be an integer', path=('coords', 1)),)
    ```
"""

from .base import BaseSchema, Bounds
from .composites import (
    ArraySchema,
    NullableSchema,
    StrictObjectSchema,
    array,
    nullable,
    strict_object,
)
from .exceptions import (
    AsyncValidationError,
    SchemaConfigurationError,
    SchemaError,
    SchemaValidationError,
)
from .factory import SchemaFactory, schema_factory
from .primitives import (
    BooleanSchema,
    DateSchema,
    InstanceOfSchema,
    IntegerSchema,
    NumberSchema,
    StringSchema,
    boolean,
    date,
    instance_of,
    integer,
    number,
    string,
)
from .result import Issue, PathSegment, Result, prefix_issues, prepend_path
from .standard import (
    VENDOR,
    VERSION,
    StandardSchema,
    is_standard_schema,
    parse,
    validate_or_raise,
)

__version__ = "0.1.0"

__all__ = [
    # Contract
    "StandardSchema",
    "VERSION",
    "VENDOR",
    "is_standard_schema",
    "parse",
    "validate_or_raise",
    # Results
    "Result",
    "Issue",
    "PathSegment",
    "prepend_path",
    "prefix_issues",
    # Base
    "BaseSchema",
    "Bounds",
    # Primitives
    "boolean",
    "number",
    "integer",
    "string",
    "date",
    "instance_of",
    "BooleanSchema",
    "NumberSchema",
    "IntegerSchema",
    "StringSchema",
    "DateSchema",
    "InstanceOfSchema",
    # Composites
    "array",
    "strict_object",
    "nullable",
    "ArraySchema",
    "StrictObjectSchema",
    "NullableSchema",
    # Exceptions
    "SchemaError",
    "AsyncValidationError",
    "SchemaConfigurationError",
    "SchemaValidationError",
    # Factory
    "SchemaFactory",
    "schema_factory",
]
