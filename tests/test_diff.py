from viewplay.core.config import PlaygroundConfig
from viewplay.engine.diff import diff, summarize, comparable, Reuse, Update, Replace
from viewplay.tree import modifiers as m
from viewplay.tree.nodes import text, vstack, hstack, tuple_of, color, wrap


def kinds(changes):
    return [(c.kind, c.path) for c in changes]


def test_identical_trees_are_reused():
    tree = vstack(text("a"), text("b"))
    assert kinds(diff(tree, tree)) == [("reuse", ()), ("reuse", (0,)), ("reuse", (1,))]


def test_wrapping_replaces_root_but_reuses_base():
    node = vstack(text("a"))
    changes = diff(node, wrap(node, m.blur(2)))
    assert isinstance(changes[0], Replace)
    assert changes[0].path == ()
    assert Reuse((0,)) in changes
    assert Reuse((0, 0)) in changes


def test_wrapping_a_leaf():
    node = text("a")
    assert kinds(diff(node, wrap(node, m.font("title")))) == [("replace", ()), ("reuse", (0,))]


def test_unwrapping_reuses_inner_children():
    node = vstack(text("a"))
    changes = diff(wrap(node, m.blur(2)), node)
    assert kinds(changes) == [("replace", ()), ("reuse", (0,))]


def test_apply_if_switch_is_update():
    before = m.apply_if(text("a"), False, m.blur(2))
    after = m.apply_if(text("a"), True, m.blur(2))
    changes = diff(before, after)
    assert isinstance(changes[0], Update)
    assert changes[0].path == ()
    assert changes[0].new_style.get("blur") == 2.0
    assert not any(isinstance(c, Replace) for c in changes)


def test_apply_either_switch_is_replace():
    before = m.apply_either(text("a"), False, m.blur(2), m.blur(4))
    after = m.apply_either(text("a"), True, m.blur(2), m.blur(4))
    changes = diff(before, after)
    assert kinds(changes) == [("replace", ())]
    assert changes[0].new_subtree == after


def test_leaf_kind_change_is_replace():
    assert kinds(diff(vstack(text("a")), vstack(color("red")))) == [("reuse", ()), ("replace", (0,))]


def test_leaf_payload_change_is_update():
    changes = diff(text("a"), text("b"))
    assert changes == [Update((), changes[0].new_style, "b")]


def test_child_count_change_replaces_stack():
    assert kinds(diff(vstack(text("a")), vstack(text("a"), text("b")))) == [("replace", ())]


def test_stack_axis_matters():
    assert kinds(diff(vstack(text("a")), hstack(text("a")))) == [("replace", ())]


def test_environment_change_updates_descendants():
    before = vstack(text("a"), text("b").apply(m.font("huge"))).apply(m.font("large"))
    after = vstack(text("a"), text("b").apply(m.font("huge"))).apply(m.font("small"))
    changes = diff(before, after)
    assert kinds(changes) == [
        ("update", ()),
        ("update", (0,)),
        ("update", (0, 0)),
        ("reuse", (0, 1)),
        ("reuse", (0, 1, 0)),
    ]


def test_modifier_swap_is_update_not_replace():
    before = wrap(text("a"), m.blur(1))
    after = wrap(text("a"), m.padding(1))
    assert comparable(before, after)
    changes = diff(before, after)
    assert kinds(changes) == [("update", ()), ("update", (0,))]
    assert changes[0].new_style.get("padding") == 1.0
    assert changes[0].new_style.get("blur") is None


def test_modifier_channel_swap_is_update():
    before = wrap(text("a"), m.environment("font", "body"))
    after = wrap(text("a"), m.direct("font", "body"))
    assert not any(isinstance(c, Replace) for c in diff(before, after))


def test_inert_modifiers_with_different_names_are_reused():
    before = wrap(text("a"), m.blur(1).inert())
    after = wrap(text("a"), m.padding(1).inert())
    assert kinds(diff(before, after)) == [("reuse", ()), ("reuse", (0,))]


def test_tuple_cells_compared_in_place():
    before = tuple_of(text("a"), text("b"), text("c"))
    after = tuple_of(text("a"), text("B"), text("c"))
    assert summarize(diff(before, after)) == {"reuse": 3, "update": 1}


def test_comparison_is_value_based():
    assert comparable(vstack(text("a")), vstack(text("zzz")))
    assert diff(vstack(text("a")), vstack(text("a"))) == diff(vstack(text("a")), vstack(text("a")))


def test_reuse_records_can_be_suppressed():
    config = PlaygroundConfig(emit_reuse=False)
    before = vstack(text("a"), text("b"))
    after = vstack(text("a"), text("c"))
    assert kinds(diff(before, after, config)) == [("update", (1,))]


def test_changes_are_preorder():
    before = vstack(hstack(text("a"), text("b")), text("c"))
    after = vstack(hstack(text("x"), text("b")), text("y"))
    paths = [c.path for c in diff(before, after)]
    assert paths == [(), (0,), (0, 0), (0, 1), (1,)]
