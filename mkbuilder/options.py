from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

USE_FORWARD_DECLARATIONS = "UseForwardDeclarations"
SKIP_IMPORTS_IN_IMPLEMENTATION = "SkipImportsInImplementation"
NO_VALUE_SEMANTICS = "NoValueSemantics"


@dataclass(frozen=True)
class IncludeOptions:
    """Include directives the builder plugin honors, parsed once per value type.

    use_forward_declarations
        Forward-declarable type lookups are imported privately, and attribute
        imports are private unless the type cannot be used without its full
        definition. Without it every import the builder needs is public.
    skip_imports_in_implementation
        Drop attribute imports entirely. Only takes effect together with
        ``use_forward_declarations``; the forward declarations stay.
    value_semantics
        Mutation methods copy incoming values of copyable types. Turned off
        by the ``NoValueSemantics`` directive.
    """

    use_forward_declarations: bool = False
    skip_imports_in_implementation: bool = False
    value_semantics: bool = True

    @classmethod
    def from_includes(cls, includes: Iterable[str]) -> "IncludeOptions":
        # Unrecognized directives belong to other plugins.
        names = set(includes)
        return cls(
            use_forward_declarations=USE_FORWARD_DECLARATIONS in names,
            skip_imports_in_implementation=SKIP_IMPORTS_IN_IMPLEMENTATION in names,
            value_semantics=NO_VALUE_SEMANTICS not in names,
        )

    @property
    def make_public_imports(self) -> bool:
        return not self.use_forward_declarations

    @property
    def skip_attribute_imports(self) -> bool:
        return self.use_forward_declarations and self.skip_imports_in_implementation
