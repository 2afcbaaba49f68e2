from __future__ import annotations

from .model import Attribute

BUILDER_SUFFIX = "Builder"


def capitalize(s: str) -> str:
    return s[:1].upper() + s[1:]


def lowercased(s: str) -> str:
    """Lower-case only the first character: ``PersonName`` -> ``personName``."""
    return s[:1].lower() + s[1:]


def remove_capitalized_prefix(s: str) -> str:
    """Strip a class-prefix convention such as ``RM`` from ``RMPerson``.

    The prefix is the run of capitals that is followed by another capital, so
    the capital starting the real word is kept.
    """
    i = 0
    while i < len(s) - 1 and s[i].isupper() and s[i + 1].isupper():
        i += 1
    if i and s[i:].isupper():
        # all capitals (e.g. ``URL``): nothing to tell prefix from word
        return s
    return s[i:]


def spaces(count: int) -> str:
    return " " * max(count, 0)


def builder_name(type_name: str) -> str:
    return type_name + BUILDER_SUFFIX


def short_name(type_name: str) -> str:
    return lowercased(remove_capitalized_prefix(type_name))


def existing_argument_name(type_name: str) -> str:
    return "existing" + capitalize(short_name(type_name))


def seed_factory_keyword(type_name: str) -> str:
    short = short_name(type_name)
    return f"{short}FromExisting{capitalize(short)}"


def argument_name(attribute: Attribute) -> str:
    return attribute.name


def mutation_keyword(attribute: Attribute) -> str:
    return "with" + capitalize(argument_name(attribute))


def ivar_name(attribute: Attribute) -> str:
    return "_" + attribute.name


def value_type_reference(type_name: str) -> str:
    return type_name + " *"
