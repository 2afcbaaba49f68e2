from __future__ import annotations

from typing import Sequence

from .model import Attribute
from .naming import mutation_keyword, spaces

RETURN_OPENING = "return "
OPENING_BRACE = "["


def _with_terminator(lines: list[str], terminator: str) -> list[str]:
    updated = list(lines)
    updated[-1] = updated[-1] + terminator
    return updated


def nested_call_lines(
    factory_call: str, seed_name: str, attributes: Sequence[Attribute]
) -> list[str]:
    """Lay out ``factory_call`` wrapped in one ``with<Attr>:`` send per attribute.

    The first line opens every bracket up front; each following line closes
    one, indented so it sits under the bracket it closes::

        return [[[PersonBuilder person]
                 withName:existingPerson.name]
                withAge:existingPerson.age];
    """
    openings = OPENING_BRACE * len(attributes)
    offset = len(RETURN_OPENING) + len(openings)
    lines = [RETURN_OPENING + openings + factory_call]
    for index, attribute in enumerate(attributes):
        lines.append(
            f"{spaces(offset - index)}{mutation_keyword(attribute)}:"
            f"{seed_name}.{attribute.name}]"
        )
    return _with_terminator(lines, ";")
