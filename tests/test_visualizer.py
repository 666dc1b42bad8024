"""
Unit tests for the Visualizer state container.
"""

import pytest

from bintree import node_count
from engine import Visualizer, StepperState


@pytest.fixture
def vis():
    return Visualizer.sample()


def test_sample_state(vis):
    assert vis.tree.value == 1
    assert len(vis.plan) == 7
    assert vis.state == StepperState.NOT_STARTED
    assert vis.theme == "light"


def test_listeners_notified(vis):
    calls = []
    unsubscribe = vis.subscribe(lambda v: calls.append(v.cursor))

    vis.advance()
    vis.advance()
    unsubscribe()
    vis.advance()

    assert calls == [0, 1]


def test_reset_keeps_tree_and_plan(vis):
    tree, plan = vis.tree, vis.plan
    vis.advance()
    vis.reset()

    assert vis.tree is tree
    assert vis.plan is plan
    assert vis.result == ()


def test_regenerate_replaces_tree_and_plan_together(vis):
    vis.advance()
    vis.toggle_play()
    vis.regenerate(seed=3)

    assert len(vis.plan) == node_count(vis.tree)
    assert vis.cursor == -1
    assert not vis.is_playing
    assert vis.visited == frozenset()


def test_load_sample(vis):
    vis.regenerate(seed=9)
    vis.load_sample()

    assert [s.value for s in vis.plan] == [4, 2, 5, 1, 6, 3, 7]


def test_toggle_theme(vis):
    vis.toggle_theme()
    assert vis.is_dark
    vis.toggle_theme()
    assert vis.theme == "light"


def test_unknown_theme_rejected(vis):
    with pytest.raises(ValueError):
        vis.set_theme("sepia")


def test_tick_notifies_only_on_step(vis):
    calls = []
    vis.subscribe(lambda v: calls.append(v.cursor))

    assert vis.tick(now=0) is False
    assert calls == []


def test_fire_advances_while_playing(vis):
    vis.toggle_play()
    assert vis.fire() is True
    assert vis.result == (4,)


def test_empty_tree():
    vis = Visualizer(None)

    assert vis.plan == ()
    assert vis.advance() is False


class TestSerialisation:
    def test_round_trip_restores_progress(self, vis):
        vis.advance()
        vis.advance()
        vis.toggle_theme()

        copy = Visualizer.from_dict(vis.to_dict())

        assert copy.cursor == 1
        assert copy.result == (4, 2)
        assert copy.visited == {"4", "2"}
        assert copy.theme == "dark"
        assert copy.plan == vis.plan

    def test_round_trip_keeps_playing(self, vis):
        vis.toggle_play()
        copy = Visualizer.from_dict(vis.to_dict())

        assert copy.is_playing

    def test_round_trip_random_tree(self, vis):
        vis.regenerate(seed=21)
        copy = Visualizer.from_dict(vis.to_dict())

        assert copy.tree.to_dict() == vis.tree.to_dict()

    def test_mismatched_plan_rejected(self, vis):
        data = vis.to_dict()
        data["plan"] = list(reversed(data["plan"]))

        with pytest.raises(ValueError):
            Visualizer.from_dict(data)


class TestEpoch:
    @pytest.mark.parametrize("action", ["advance", "reset", "toggle_play", "pause", "load_sample"])
    def test_user_actions_bump_epoch(self, vis, action):
        before = vis.epoch
        getattr(vis, action)()

        assert vis.epoch == before + 1

    def test_regenerate_bumps_epoch(self, vis):
        vis.regenerate(seed=4)
        assert vis.epoch == 1

    def test_timer_and_theme_keep_epoch(self, vis):
        vis.toggle_play()
        epoch = vis.epoch
        vis.fire(epoch)
        vis.tick(now=0)
        vis.toggle_theme()

        assert vis.epoch == epoch

    def test_fire_with_old_epoch_is_ignored(self, vis):
        vis.toggle_play()
        scheduled = vis.epoch
        vis.reset()
        vis.toggle_play()

        assert vis.fire(scheduled) is False
        assert vis.cursor == -1
        assert vis.fire(vis.epoch) is True
        assert vis.cursor == 0

    def test_epoch_survives_round_trip(self, vis):
        vis.advance()
        vis.toggle_play()
        copy = Visualizer.from_dict(vis.to_dict())

        assert copy.epoch == vis.epoch == 2
