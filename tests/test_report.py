from viewplay.engine.diff import diff
from viewplay.engine.environment import resolve
from viewplay.playground.report import format_path, describe, format_tree, format_changes, format_run
from viewplay.playground.runner import run
from viewplay.tree import modifiers as m
from viewplay.tree.nodes import text, vstack, tuple_of, color


def test_format_path():
    assert format_path(()) == "/"
    assert format_path((0, 2)) == "/0/2"


def test_describe():
    assert describe(text("hi")) == "text 'hi'"
    assert describe(color("#ff0000")) == "color #ff0000ff"
    assert describe(tuple_of(text("a"), text("b"))) == "tupleOf(2) [2]"
    assert describe(text("a").apply(m.blur(2))) == ".blur(2) [direct]"
    assert describe(m.apply_if(text("a"), False, m.font("x"))) == ".font(inert) [environment]"


def test_format_tree_with_styles():
    root = vstack(text("a")).apply(m.font("large"))
    lines = format_tree(root, resolve(root)).splitlines()
    assert lines[0] == ".font('large') [environment]"
    assert lines[1] == "  stack(vertical) [1]"
    assert lines[2] == "    text 'a'  {font='large'}"


def test_format_changes():
    out = format_changes(diff(text("a"), text("a").apply(m.blur(1))))
    assert out.splitlines() == ["replace /  -> .blur(1) [direct]", "reuse   /0"]


def test_format_run_reports_halt():
    result = run(tuple_of(text("a"), text("b")), [lambda n: tuple_of(n)])
    assert "halted: step 0 failed" in format_run(result)
