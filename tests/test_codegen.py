import pytest

from mkbuilder.codegen import CodeBuilder


def test_braced_nests_and_blank_lines_stay_bare() -> None:
    cb = CodeBuilder()
    with cb.braced("- (void)outer"):
        cb.write("a;")
        cb.write()
        with cb.braced():
            cb.extend(["b;", ""])
    assert cb.render() == "- (void)outer\n{\n  a;\n\n  {\n    b;\n\n  }\n}\n"


def test_depth_restored_after_error() -> None:
    cb = CodeBuilder(indent="\t")
    with pytest.raises(RuntimeError):
        with cb.block():
            cb.write("x;")
            raise RuntimeError("boom")
    cb.write("y;")
    assert cb.depth == 0
    assert cb.lines == ["\tx;", "y;"]


def test_empty_render_is_single_newline() -> None:
    assert CodeBuilder().render() == "\n"
