"""Утилиты для генератора"""

from .naming import (
    to_camel_case,
    function_name_from_path,
    optional_suffix,
    ref_name,
)

__all__ = [
    "to_camel_case",
    "function_name_from_path",
    "optional_suffix",
    "ref_name",
]
