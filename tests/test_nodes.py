import pytest
from dataclasses import FrozenInstanceError

from viewplay.core.errors import ArityError
from viewplay.tree.nodes import (
    Leaf, Modified, Composite, CompositeKind, Modifier, Channel,
    leaf, composite, wrap, text, color, shape, vstack, hstack, group, tuple_of,
    walk, depth, node_count, node_at, replace_at, append_child, remove_child,
)
from viewplay.tree.style import Color, Shape


def blur(radius):
    return Modifier(Channel.DIRECT, "blur", radius)


def test_leaf_payloads_are_coerced():
    assert leaf("color", "#ff0000").payload == Color(1.0, 0.0, 0.0, 1.0)
    assert leaf("color", (0.0, 0.0, 1.0)).payload == Color(0.0, 0.0, 1.0)
    assert leaf("shape", "circle").payload == Shape("circle")
    assert leaf("text", "Hi").payload == "Hi"


def test_leaf_rejects_bad_input():
    with pytest.raises(ValueError):
        leaf("image", "cat.png")
    with pytest.raises(ValueError):
        leaf("text", 42)
    with pytest.raises(ValueError):
        leaf("shape", "hexagon")


def test_tuple_of_three_children():
    a, b, c = text("a"), text("b"), text("c")
    node = composite(CompositeKind.tuple_of(3), [a, b, c])
    assert node.children == (a, b, c)


def test_tuple_child_count_mismatch():
    with pytest.raises(ArityError) as info:
        composite(CompositeKind.tuple_of(3), [text("a"), text("b")])
    assert info.value.expected == 3
    assert info.value.actual == 2


def test_tuple_arity_ceiling():
    children = [text(str(i)) for i in range(11)]
    with pytest.raises(ArityError):
        composite(CompositeKind.tuple_of(11), children)
    # Ten is still allowed
    assert len(tuple_of(*children[:10]).children) == 10


def test_tuple_below_two_rejected():
    with pytest.raises(ArityError):
        composite(CompositeKind.tuple_of(1), [text("a")])


def test_composite_kind_validates_stack_axis():
    with pytest.raises(ValueError):
        CompositeKind("stack", axis="diagonal")
    with pytest.raises(ValueError):
        CompositeKind("stack")
    assert CompositeKind("stack", axis="depth") == CompositeKind.stack("depth")


def test_composite_kind_rejects_unknown_name():
    with pytest.raises(ValueError):
        CompositeKind("grid")


def test_conditional_needs_one_child():
    with pytest.raises(ArityError):
        composite(CompositeKind.conditional(True), [text("a"), text("b")])


def test_arity_error_is_a_value_error():
    with pytest.raises(ValueError):
        tuple_of(text("only one"))


def test_stack_and_group_accept_any_count():
    assert vstack().children == ()
    assert len(group(*(text(str(i)) for i in range(15))).children) == 15


def test_wrap_adds_exactly_one_level():
    base = vstack(text("a"), hstack(text("b")))
    wrapped = wrap(base, blur(2.0))
    assert isinstance(wrapped, Modified)
    assert wrapped.base is base
    assert depth(wrapped) == depth(base) + 1


def test_nodes_are_frozen():
    node = text("a")
    with pytest.raises(FrozenInstanceError):
        node.payload = "b"
    stack = vstack(text("a"))
    with pytest.raises(FrozenInstanceError):
        stack.children = ()


def test_children_are_stored_as_tuple():
    items = [text("a"), text("b")]
    stack = composite(CompositeKind.stack(), items)
    items.append(text("c"))
    assert len(stack.children) == 2


def test_structural_equality():
    assert vstack(text("a"), color("red")) == vstack(text("a"), color("red"))
    assert vstack(text("a")) != hstack(text("a"))
    assert hash(wrap(text("a"), blur(1.0))) == hash(wrap(text("a"), blur(1.0)))


def test_modifier_order_preserved():
    node = text("a").apply(blur(1.0)).apply(blur(2.0))
    assert node.modifier.value == 2.0
    assert node.base.modifier.value == 1.0


def test_modifier_requires_hashable_value():
    with pytest.raises(TypeError):
        Modifier(Channel.DIRECT, "offset", {"x": 1})
    assert Modifier(Channel.DIRECT, "offset", [1.0, 2.0]).value == (1.0, 2.0)


def test_walk_is_preorder():
    root = vstack(text("a"), wrap(text("b"), blur(1.0)))
    paths = [path for path, _ in walk(root)]
    assert paths == [(), (0,), (1,), (1, 0)]
    assert node_count(root) == 4


def test_node_at():
    b = text("b")
    root = vstack(text("a"), wrap(b, blur(1.0)))
    assert node_at(root, (1, 0)) is b
    with pytest.raises(IndexError):
        node_at(root, (5,))


def test_replace_at_shares_untouched_subtrees():
    left = hstack(text("a"), text("b"))
    right = hstack(text("c"))
    root = vstack(left, right)
    updated = replace_at(root, (1, 0), text("z"))

    assert node_at(updated, (1, 0)) == text("z")
    assert updated.children[0] is left
    assert root.children[1].children[0] == text("c")


def test_replace_at_through_modifier():
    root = wrap(vstack(text("a")), blur(3.0))
    updated = replace_at(root, (0, 0), text("b"))
    assert updated.modifier == root.modifier
    assert node_at(updated, (0, 0)) == text("b")


def test_append_child_respects_tuple_arity():
    stack = vstack(text("a"))
    assert len(append_child(stack, (), text("b")).children) == 2
    with pytest.raises(ArityError):
        append_child(tuple_of(text("a"), text("b")), (), text("c"))


def test_remove_child():
    stack = vstack(text("a"), text("b"), text("c"))
    assert remove_child(stack, (), 1) == vstack(text("a"), text("c"))


def test_shape_leaf_helper():
    node = shape("rounded_rectangle", 8)
    assert node.payload == Shape("rounded_rectangle", 8.0)
    assert node.shape_key() == ("leaf", "shape")
