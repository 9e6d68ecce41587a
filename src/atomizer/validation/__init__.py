from atomizer.validation.values import (
    ValueValidator,
    is_valid_color,
    is_valid_length,
    is_valid_value,
)

__all__ = ["ValueValidator", "is_valid_value", "is_valid_length", "is_valid_color"]
