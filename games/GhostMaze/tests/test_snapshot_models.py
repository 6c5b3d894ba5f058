"""
Tests for the snapshot models published to the presentation layer.
"""

import pytest
from pydantic import ValidationError

from mazechase.games import GameState
from models import (
    CollectibleKind,
    CollectibleView,
    Direction,
    GhostCondition,
    GhostVariant,
    GhostView,
    PlayerView,
    Point2D,
    RenderSnapshot,
)


def ghost_view(**overrides):
    fields = dict(
        position=Point2D(x=0.0, y=0.0),
        width=32.0,
        height=32.0,
        direction=Direction.LEFT,
        handle=1,
        variant=GhostVariant.PINK,
        condition=GhostCondition.NORMAL,
    )
    fields.update(overrides)
    return GhostView(**fields)


def player_view(**overrides):
    fields = dict(
        position=Point2D(x=32.0, y=32.0),
        width=32.0,
        height=32.0,
        direction=Direction.RIGHT,
        lives=3,
        score=0,
        skill_charges=0,
    )
    fields.update(overrides)
    return PlayerView(**fields)


class TestGhostView:
    """Test GhostView validation and labels."""

    def test_normal_label(self):
        assert ghost_view().status_label == "normal"

    def test_shield_label(self):
        assert ghost_view(shield=2).status_label == "shield 2"

    def test_scared_label_rounds_up(self):
        view = ghost_view(condition=GhostCondition.SCARED, scared_ms=4001, shield=2)
        assert view.status_label == "scared 5s"

    def test_dead_label(self):
        view = ghost_view(condition=GhostCondition.DEAD, respawn_ms=30000)
        assert view.status_label == "dead 30s"

    def test_negative_timer_rejected(self):
        with pytest.raises(ValidationError):
            ghost_view(scared_ms=-1)

    def test_zero_size_rejected(self):
        with pytest.raises(ValidationError):
            ghost_view(width=0.0)

    def test_bounds(self):
        bounds = ghost_view(position=Point2D(x=64.0, y=32.0)).bounds
        assert (bounds.x, bounds.y, bounds.width, bounds.height) == (64.0, 32.0, 32.0, 32.0)


class TestPlayerView:
    """Test PlayerView validation."""

    def test_negative_lives_rejected(self):
        with pytest.raises(ValidationError):
            player_view(lives=-1)

    def test_frozen(self):
        view = player_view()
        with pytest.raises(ValidationError):
            view.score = 10


class TestRenderSnapshot:
    """Test snapshot counters."""

    def test_remaining_counts(self):
        items = [
            CollectibleView(position=Point2D(x=0.0, y=0.0), size=4.0, kind=CollectibleKind.FOOD),
            CollectibleView(position=Point2D(x=32.0, y=0.0), size=4.0, kind=CollectibleKind.FOOD),
            CollectibleView(position=Point2D(x=64.0, y=0.0), size=8.0,
                            kind=CollectibleKind.POWER_PLUS),
        ]
        snapshot = RenderSnapshot(
            state=GameState.PLAYING, tick=3, time_ms=150,
            player=player_view(), collectibles=items,
        )
        assert snapshot.food_remaining == 2
        assert snapshot.power_plus_remaining == 1

    def test_serializes_labels(self):
        snapshot = RenderSnapshot(
            state=GameState.START, tick=0, time_ms=0,
            player=player_view(), ghosts=[ghost_view(shield=3)],
        )
        data = snapshot.model_dump()
        assert data['ghosts'][0]['status_label'] == "shield 3"
        assert data['food_remaining'] == 0
