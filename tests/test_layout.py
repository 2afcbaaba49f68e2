from hypothesis import given, strategies as st

from mkbuilder.layout import RETURN_OPENING, nested_call_lines

from conftest import object_attribute

names = st.lists(st.from_regex(r"[a-z][A-Za-z0-9]{0,8}", fullmatch=True), max_size=12, unique=True)


def _attrs(attr_names: list[str]):
    return tuple(object_attribute(n, "NSString") for n in attr_names)


def test_person_staircase() -> None:
    lines = nested_call_lines(
        "[PersonBuilder person]",
        "existingPerson",
        _attrs(["name", "age"]),
    )
    assert lines == [
        "return [[[PersonBuilder person]",
        "         withName:existingPerson.name]",
        "        withAge:existingPerson.age];",
    ]


def test_no_attributes_is_single_call() -> None:
    assert nested_call_lines("[EmptyBuilder empty]", "existingEmpty", ()) == [
        "return [EmptyBuilder empty];"
    ]


def test_last_close_lines_up_under_return() -> None:
    # offset - (N - 1) == len("return ") + 1 for every N >= 1
    for count in (1, 12, 40):
        lines = nested_call_lines("[XBuilder x]", "existingX", _attrs([f"a{i}" for i in range(count)]))
        last = count - 1
        assert lines[-1] == " " * 8 + f"withA{last}:existingX.a{last}];"
        assert lines[1].startswith(" " * (7 + count) + "withA0:")


@given(names)
def test_layout_is_deterministic(attr_names: list[str]) -> None:
    attrs = _attrs(attr_names)
    assert nested_call_lines("[TBuilder t]", "existingT", attrs) == nested_call_lines(
        "[TBuilder t]", "existingT", attrs
    )


@given(names)
def test_layout_shape(attr_names: list[str]) -> None:
    lines = nested_call_lines("[TBuilder t]", "existingT", _attrs(attr_names))
    assert len(lines) == len(attr_names) + 1
    assert lines[0] == RETURN_OPENING + "[" * len(attr_names) + "[TBuilder t]" + ("" if attr_names else ";")
    assert lines[-1].endswith(";")
    offset = len(RETURN_OPENING) + len(attr_names)
    for index, (line, name) in enumerate(zip(lines[1:], attr_names)):
        indentation = len(line) - len(line.lstrip(" "))
        assert indentation == max(offset - index, 0)
        assert line.lstrip(" ").startswith(f"with{name[0].upper()}{name[1:]}:existingT.{name}]")
