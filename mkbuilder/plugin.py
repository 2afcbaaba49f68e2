from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .builder import builder_file_for_value_type
from .model import (
    Attribute, ClassNullability, CodeFile, FileType, ForwardDeclaration, Import, Method, Property, ValueType,
)
from .semantics import DEFAULT_POLICY, SemanticsPolicy


@dataclass(frozen=True)
class BuilderPlugin:
    """Host-facing hooks. Only ``additional_files`` contributes anything;
    the value type's own file is left untouched."""

    policy: SemanticsPolicy = DEFAULT_POLICY
    required_includes_to_run: tuple[str, ...] = ("RMBuilder",)

    def additional_files(self, value_type: ValueType) -> list[CodeFile]:
        return [builder_file_for_value_type(value_type, self.policy)]

    def additional_types(self, value_type: ValueType) -> list[ValueType]:
        return []

    def attributes(self, value_type: ValueType) -> list[Attribute]:
        return []

    def class_methods(self, value_type: ValueType) -> list[Method]:
        return []

    def file_transformation(self, request: Any) -> Any:
        return request

    def file_type(self, value_type: ValueType) -> FileType | None:
        return None

    def forward_declarations(self, value_type: ValueType) -> list[ForwardDeclaration]:
        return []

    def functions(self, value_type: ValueType) -> list[str]:
        return []

    def header_comments(self, value_type: ValueType) -> list[str]:
        return []

    def implemented_protocols(self, value_type: ValueType) -> list[str]:
        return []

    def imports(self, value_type: ValueType) -> list[Import]:
        return []

    def instance_methods(self, value_type: ValueType) -> list[Method]:
        return []

    def macros(self, value_type: ValueType) -> list[str]:
        return []

    def properties(self, value_type: ValueType) -> list[Property]:
        return []

    def static_constants(self, value_type: ValueType) -> list[str]:
        return []

    def validation_errors(self, value_type: ValueType) -> list[str]:
        return []

    def nullability(self, value_type: ValueType) -> ClassNullability | None:
        return None

    def subclassing_restricted(self, value_type: ValueType) -> bool:
        return False


def create_plugin(policy: SemanticsPolicy = DEFAULT_POLICY) -> BuilderPlugin:
    return BuilderPlugin(policy=policy)
