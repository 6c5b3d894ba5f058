"""Unit tests for the command input layer."""
import pygame
import pytest

from mazechase.games.input import InputEvent, InputManager
from mazechase.games.input.sources import DEFAULT_KEY_BINDINGS, InputSource, KeyboardInputSource
from models import Command, Direction


class ScriptedSource(InputSource):
    """Replays a fixed list of commands, one per update."""

    def __init__(self, commands):
        self._pending = list(commands)
        self._queue = []

    def update(self, dt):
        if self._pending:
            self._queue.append(InputEvent(command=self._pending.pop(0), timestamp=0.0))

    def poll_events(self):
        events, self._queue = self._queue, []
        return events


class TestInputEvent:
    """Tests for InputEvent validation."""

    def test_valid_event(self):
        event = InputEvent(command=Command.TURN_LEFT, timestamp=1.5)
        assert event.command.direction == Direction.LEFT
        assert str(event) == "InputEvent(command=turn_left, t=1.500)"

    def test_rejects_non_command(self):
        with pytest.raises(ValueError):
            InputEvent(command="turn_left", timestamp=0.0)

    def test_rejects_negative_timestamp(self):
        with pytest.raises(ValueError):
            InputEvent(command=Command.START_GAME, timestamp=-1.0)

    def test_non_turn_commands_have_no_direction(self):
        assert Command.ACTIVATE_SKILL.direction is None
        assert Command.BREAK_ICE.direction is None


class TestInputManager:
    """Tests for InputManager."""

    def test_no_source(self):
        manager = InputManager()
        manager.update(0.016)
        assert not manager.has_source()
        assert manager.get_events() == []

    def test_polls_active_source(self):
        manager = InputManager(ScriptedSource([Command.START_GAME, Command.TURN_UP]))
        manager.update(0.016)
        assert [e.command for e in manager.get_events()] == [Command.START_GAME]
        assert manager.get_events() == []
        manager.update(0.016)
        assert [e.command for e in manager.get_events()] == [Command.TURN_UP]

    def test_clear_events(self):
        manager = InputManager(ScriptedSource([Command.BREAK_ICE]))
        manager.update(0.016)
        manager.clear_events()
        assert manager.get_events() == []

    def test_rejects_non_source(self):
        with pytest.raises(TypeError):
            InputManager().set_source(object())


class TestKeyboardBindings:
    """Tests for the keyboard source's key map."""

    def test_default_bindings(self):
        source = KeyboardInputSource()
        assert source.translate(pygame.K_UP) == Command.TURN_UP
        assert source.translate(pygame.K_a) == Command.TURN_LEFT
        assert source.translate(pygame.K_SPACE) == Command.ACTIVATE_SKILL
        assert source.translate(pygame.K_v) == Command.BREAK_ICE
        assert source.translate(pygame.K_F12) is None

    def test_every_command_is_bound(self):
        assert set(DEFAULT_KEY_BINDINGS.values()) == set(Command)

    def test_custom_bindings(self):
        source = KeyboardInputSource({pygame.K_j: Command.TURN_LEFT})
        assert source.translate(pygame.K_j) == Command.TURN_LEFT
        assert source.translate(pygame.K_LEFT) is None

    def test_bindings_copy(self):
        source = KeyboardInputSource()
        source.bindings.clear()
        assert source.translate(pygame.K_UP) == Command.TURN_UP
