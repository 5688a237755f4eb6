"""
Argline CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .base import ArrayConversion, Conversion, Type
from .basic import (
    ArrayType,
    BlankType,
    BooleanType,
    DeferredType,
    NumberType,
    SelectionType,
    TextType,
    shutdown,
    startup,
)
from .registry import TypeRegistry, default_registry

__all__ = [
    "ArrayConversion",
    "ArrayType",
    "BlankType",
    "BooleanType",
    "Conversion",
    "DeferredType",
    "NumberType",
    "SelectionType",
    "TextType",
    "Type",
    "TypeRegistry",
    "default_registry",
    "shutdown",
    "startup",
]
