"""Tests for the default-substate cascade."""
import pytest
from tick_hsm import DefaultSubstateCycleError, StateContext, StateManager


def _recording(log, default=None):
    return StateContext(
        enter=lambda n: log.append(("enter", n)),
        exit=lambda n: log.append(("exit", n)),
        default_substate=default,
    )


class TestDefaultSubstates:
    """Entering a composite state drills down to a leaf."""

    def test_chain_resolves_to_leaf(self):
        """a -> default b -> default c: change_state('a') lands on a.b.c."""
        # Arrange
        log = []
        manager = StateManager()
        manager.register_state("a", _recording(log, default="b"))
        manager.register_state("a.b", _recording(log, default="c"))
        manager.register_state("a.b.c", _recording(log))

        # Act
        manager.change_state("a")

        # Assert
        assert manager.current_state() == "a.b.c"
        assert log == [("enter", "a"), ("enter", "b"), ("enter", "c")]

    def test_explicit_leaf_skips_cascade(self):
        """Targeting a non-default child enters that child only."""
        log = []
        manager = StateManager()
        manager.register_state("a", _recording(log, default="b"))
        manager.register_state("a.b", _recording(log))
        manager.register_state("a.c", _recording(log))

        manager.change_state("a.c")

        assert manager.current_state() == "a.c"
        assert ("enter", "b") not in log

    def test_cascade_starts_from_explicit_target(self):
        log = []
        manager = StateManager()
        manager.register_state("a", _recording(log, default="b"))
        manager.register_state("a.b", _recording(log))
        manager.register_state("a.c", _recording(log, default="d"))
        manager.register_state("a.c.d", _recording(log))

        manager.change_state("a.c")

        assert manager.current_state() == "a.c.d"

    def test_cascade_runs_even_when_target_unchanged(self):
        """Returning to a composite from its leaf re-enters the default."""
        log = []
        manager = StateManager()
        manager.register_state("a", _recording(log, default="b"))
        manager.register_state("a.b", _recording(log))
        manager.change_state("a")
        assert manager.current_state() == "a.b"
        log.clear()

        manager.change_state("a")

        assert log == [("exit", "b"), ("enter", "b")]
        assert manager.current_state() == "a.b"

    def test_missing_default_is_ignored(self):
        manager = StateManager()
        manager.register_state("a", StateContext(default_substate="ghost"))
        manager.register_state("a.real")

        manager.change_state("a")

        assert manager.current_state() == "a"

    def test_default_registered_after_parent(self):
        """The default is looked up at transition time, not registration time."""
        manager = StateManager()
        manager.register_state("a", StateContext(default_substate="b"))
        manager.change_state("a")
        assert manager.current_state() == "a"

        manager.register_state("a.b")
        manager.change_state("")
        manager.change_state("a")
        assert manager.current_state() == "a.b"

    def test_default_without_callbacks(self):
        manager = StateManager()
        manager.register_state("a", StateContext(default_substate="b"))
        manager.register_state("a.b")
        manager.change_state("a")
        assert manager.current_state() == "a.b"

    def test_default_leaf_exited_on_next_transition(self):
        log = []
        manager = StateManager()
        manager.register_state("a", _recording(log, default="b"))
        manager.register_state("a.b", _recording(log))
        manager.register_state("z", _recording(log))
        manager.change_state("a")
        log.clear()

        manager.change_state("z")

        assert log == [("exit", "b"), ("exit", "a"), ("enter", "z")]

    def test_cycle_in_corrupted_tree_raises(self):
        """A child id that points back at an ancestor is caught."""
        # Arrange
        manager = StateManager()
        manager.register_state("a", StateContext(default_substate="b"))
        manager.register_state("a.b", StateContext(default_substate="loop"))
        tree = manager.tree
        a = tree.resolve(("a",))
        b = tree.resolve(("a", "b"))
        b.children["loop"] = a.id

        # Act & Assert
        with pytest.raises(DefaultSubstateCycleError) as excinfo:
            manager.change_state("a")
        assert excinfo.value.name == "a"
        assert manager.transitioning is False
