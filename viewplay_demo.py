"""
viewplay Demo

Walks through the view/modifier ideas one run at a time:
- Modifiers wrap views instead of changing them
- Environment modifiers are overridden by children, direct ones accumulate
- A conditional modifier updates one view; an if/else swaps two
- Tuple containers stop at ten children

Run:
    python viewplay_demo.py
    VIEWPLAY_LOG_LEVEL=DEBUG python viewplay_demo.py
"""

from __future__ import annotations
import logging

from viewplay import (
    PlaygroundConfig, SignalBridge, Playground, StepError,
    vstack, text, color, shape, tuple_of, append_child, replace_at, node_at,
    resolve, run, step, format_tree, format_run,
)
from viewplay.core.signal import SignalDebugger
from viewplay.tree import modifiers as m


def section(title: str):
    print()
    print(title)
    print("=" * len(title))


def demo_wrapping(config: PlaygroundConfig, bridge: SignalBridge):
    section("Modifiers wrap views")
    card = vstack(text("Hello"), shape("rounded_rectangle", 12))

    @step("add padding")
    def add_padding(node):
        return node.apply(m.padding(8))

    @step("add background")
    def add_background(node):
        return node.apply(m.background("yellow"))

    result = run(card, [add_padding, add_background], config, bridge)
    print(format_tree(result.final, resolve(result.final, config)))
    print()
    print(format_run(result))


def demo_environment(config: PlaygroundConfig, bridge: SignalBridge):
    section("Environment overrides, direct accumulates")
    root = vstack(
        text("Gryffindor").apply(m.font("huge")).apply(m.blur(0)),
        text("Hufflepuff"),
        color("red"),
    ).apply(m.font("large")).apply(m.blur(5))
    print(format_tree(root, resolve(root, config)))


def demo_conditionals(config: PlaygroundConfig, bridge: SignalBridge):
    section("Conditional modifier vs if/else")
    label = text("Tap me")
    red, blue = m.foreground_color("red"), m.foreground_color("blue")

    toggled = run(
        m.apply_if(label, False, red),
        [step("flip condition")(lambda _: m.apply_if(label, True, red))],
        config, bridge,
    )
    branched = run(
        m.apply_either(label, False, red, blue),
        [step("flip branch")(lambda _: m.apply_either(label, True, red, blue))],
        config, bridge,
    )
    print("apply_if:")
    print(format_run(toggled))
    print()
    print("apply_either:")
    print(format_run(branched))


def demo_session(config: PlaygroundConfig, bridge: SignalBridge):
    section("Interactive session")
    session = Playground(vstack(text("Draft")), config, bridge)
    session.apply(step("make it big")(lambda n: n.apply(m.font("title"))))
    session.apply(step("fade")(lambda n: n.apply(m.opacity(0.4))))
    print(format_tree(session.current, resolve(session.current, config)))
    session.rewind()
    print("after rewind:")
    print(format_tree(session.current, resolve(session.current, config)))


def demo_arity(config: PlaygroundConfig, bridge: SignalBridge):
    section("Tuple arity ceiling")
    row = tuple_of(*(text(str(i)) for i in range(10)))

    @step("restyle third cell")
    def restyle(node):
        return replace_at(node, (2,), node_at(node, (2,)).apply(m.opacity(0.5)))

    @step("add an eleventh cell")
    def add_cell(node):
        return append_child(node, (), text("10"))

    result = run(row, [restyle, add_cell], config, bridge)
    print(format_run(result))
    if result.error is not None:
        print(f"kept {len(result)} result(s) before the failure")


def main():
    config = PlaygroundConfig.from_env()
    logging.basicConfig(level=config.logging_level, format="%(levelname)s %(name)s: %(message)s")

    bridge = SignalBridge()
    debugger = SignalDebugger(bridge)
    debugger.watch_all()

    for demo in (demo_wrapping, demo_environment, demo_conditionals, demo_session, demo_arity):
        try:
            demo(config, bridge)
        except StepError as e:
            print(f"{demo.__name__} stopped: {e}")

    debugger.detach()


if __name__ == "__main__":
    main()
