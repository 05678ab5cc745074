from sqlalchemy import Enum as SAEnum

from fitlife.enums.app_enum import enum_values


def enum_column_type(enum_cls):
    """Store the enum's value ("Weight Loss") rather than its member name."""
    return SAEnum(
        enum_cls,
        values_callable=enum_values,
        native_enum=False,
        validate_strings=True,
        length=20,
    )
