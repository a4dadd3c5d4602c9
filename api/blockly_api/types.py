"""
    Field value types with conversion to and from their XML text form.
"""
from enum import Enum
from typing import Any
from datetime import date, datetime


class FieldType(Enum):
    TEXT = "text"
    NUMBER = "number"
    CHECKBOX = "checkbox"
    DROPDOWN = "dropdown"
    VARIABLE = "variable"
    DATE = "date"
    COLOUR = "colour"


class FieldValueConverter:
    """Conversion of field values between Python objects and markup text"""

    @staticmethod
    def convert_to_type(value: Any, target_type: FieldType) -> Any:
        """Convert value to target type"""
        if target_type == FieldType.NUMBER:
            if isinstance(value, bool):
                raise TypeError("booleans are not numbers")
            if isinstance(value, (int, float)):
                return value
            text = str(value).strip()
            # Blockly stores integral numbers without a decimal part
            if text.lstrip('-').isdigit():
                return int(text)
            return float(text)
        elif target_type == FieldType.CHECKBOX:
            if isinstance(value, str):
                return value.strip().upper() in ('TRUE', '1', 'YES')
            return bool(value)
        elif target_type == FieldType.DATE:
            if isinstance(value, str):
                return datetime.fromisoformat(value.strip()).date()
            elif isinstance(value, datetime):
                return value.date()
            elif isinstance(value, date):
                return value
            raise TypeError(f"{type(value).__name__} is not a date")
        else:  # TEXT, DROPDOWN, VARIABLE, COLOUR
            return str(value)

    @staticmethod
    def validate_and_convert(value: Any, target_type: FieldType) -> Any:
        """Validate and convert value"""
        try:
            return FieldValueConverter.convert_to_type(value, target_type)
        except (ValueError, TypeError) as e:
            raise ValueError(f"Cannot convert {value!r} to {target_type.value}: {str(e)}")

    @staticmethod
    def to_text(value: Any, field_type: FieldType) -> str:
        """Render a converted value the way it is stored in markup."""
        if value is None:
            return ''
        if field_type == FieldType.CHECKBOX:
            return 'TRUE' if value else 'FALSE'
        if field_type == FieldType.DATE:
            return value.isoformat()
        return str(value)
