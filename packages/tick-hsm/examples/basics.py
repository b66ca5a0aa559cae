"""Basics -- registering states and walking through transitions.

Demonstrates:
- Registering nested states with enter/exit callbacks
- A composite state that drills down through its default substate
- Which states are exited and entered for each transition

Run: python -m examples.basics
"""

from tick_hsm import StateContext, StateManager


def on_enter(name: str) -> None:
    print(f"  entering {name}")


def on_exit(name: str) -> None:
    print(f"  exiting {name}")


def main() -> None:
    print("=== Hierarchical states ===\n")

    manager = StateManager()

    logged = StateContext(enter=on_enter, exit=on_exit)
    manager.register_state("menu", logged)
    manager.register_state(
        "menu.options",
        StateContext(enter=on_enter, exit=on_exit, default_substate="video"),
    )
    manager.register_state("game", logged)
    # No callbacks: entering and exiting "audio" is silent.
    manager.register_state("menu.options.audio")
    manager.register_state("menu.options.video", logged)

    for target in ["menu", "menu.options", "game", "menu.options.audio", "menu.options.video", ""]:
        print(f"-> change_state({target!r})")
        manager.change_state(target)
        print(f"   now in {manager.current_state()!r}\n")


if __name__ == "__main__":
    main()
