from .model import (
    Attribute, AttributeType, Nullability, TypeLookup, ValueType,
    CodeFile, ObjCClass, Method, Keyword, KeywordArgument, Property, Import, ForwardDeclaration,
)
from .options import IncludeOptions
from .semantics import SemanticsPolicy, DefaultSemanticsPolicy, DEFAULT_POLICY, TypeCategory
from .builder import builder_file_for_value_type, builder_class_for_value_type
from .dependencies import imports_for_builder, forward_declarations_for_builder
from .layout import nested_call_lines
from .plugin import BuilderPlugin, create_plugin
from .types import mk_value_type

__all__ = [
    # input descriptors
    "Attribute", "AttributeType", "Nullability", "TypeLookup", "ValueType",
    # output descriptors
    "CodeFile", "ObjCClass", "Method", "Keyword", "KeywordArgument", "Property", "Import",
    "ForwardDeclaration",
    # configuration & policy
    "IncludeOptions", "SemanticsPolicy", "DefaultSemanticsPolicy", "DEFAULT_POLICY", "TypeCategory",
    # synthesis
    "builder_file_for_value_type", "builder_class_for_value_type",
    "imports_for_builder", "forward_declarations_for_builder", "nested_call_lines",
    # host surface
    "BuilderPlugin", "create_plugin", "mk_value_type",
]
