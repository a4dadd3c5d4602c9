"""
    Field model - a named, typed value shown on a block.
"""
from typing import Any, Optional, Sequence, Tuple

from ..types import FieldType, FieldValueConverter
from ..xml import qname


class Field:
    """Editable value of a block, e.g. a number or a dropdown choice."""

    def __init__(self, name: str, field_type: FieldType = FieldType.TEXT,
                 value: Any = None, options: Optional[Sequence[str]] = None):
        if not name:
            raise ValueError("Field name cannot be empty")
        self.name = name
        self.field_type = field_type
        self.options: Optional[Tuple[str, ...]] = tuple(options) if options is not None else None
        self.value: Any = None
        if value is not None:
            self.set_value(value)
        elif self.options:
            self.value = self.options[0]

    def set_value(self, value: Any) -> None:
        converted = FieldValueConverter.validate_and_convert(value, self.field_type)
        if self.options is not None and converted not in self.options:
            raise ValueError(
                f"Value {converted!r} is not an option of field '{self.name}'. "
                f"Available: {list(self.options)}"
            )
        self.value = converted

    def get_text(self) -> str:
        return FieldValueConverter.to_text(self.value, self.field_type)

    def set_from_text(self, text: str) -> None:
        # Empty markup clears non-text fields instead of failing conversion
        if not text and self.field_type not in (FieldType.TEXT, FieldType.VARIABLE):
            self.value = None
            return
        self.set_value(text)

    def serialize(self, writer) -> None:
        with writer.element(qname("field"), name=self.name):
            writer.write(self.get_text())

    def __repr__(self) -> str:
        return f"Field({self.name}={self.value!r})"
