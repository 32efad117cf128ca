"""Tests for the behavioral pattern demos."""

from __future__ import annotations

import pytest

from catalogue.behavioral import (
    chain_of_responsibility,
    command,
    context_state,
    iterator,
    mediator,
    memento,
    number_observer,
    observer,
    state,
    strategy,
    template_method,
    text_file_command,
    visitor,
)


def test_chain_of_responsibility_trace(trace):
    assert trace(chain_of_responsibility.main) == [
        "This is an OK button that...",
        "This panel does...",
        "Opening wiki page: http://wiki.example.com/dialog",
    ]


class TestCommand:
    def test_trace(self, trace):
        assert trace(command.main) == [
            "Executing command",
            "Executing command",
            "Text after cut: ', World!'",
            "Executing command",
            "Executing PasteCommand",
            "Text after paste: 'Hello, World!'",
            "Undoing command",
            "Undoing PasteCommand",
            "Text after undo: ', World!'",
        ]

    def test_copy_is_not_recorded(self, capsys):
        app = command.Application()
        editor = command.Editor("abc")
        editor.select(0, 1)

        app.execute_command(command.CopyCommand(app, editor))

        assert len(app.history) == 0
        assert app.clipboard == "a"

    def test_undo_restores_text_before_cut(self, capsys):
        app = command.Application()
        editor = command.Editor("abc")
        editor.select(0, 1)
        app.execute_command(command.CutCommand(app, editor))
        assert editor.text == "bc"

        app.undo()

        assert editor.text == "abc"

    def test_undo_on_empty_history_is_a_noop(self, capsys):
        app = command.Application()
        app.undo()
        assert capsys.readouterr().out.splitlines() == ["Undoing command"]


class TestTextFileCommand:
    def test_trace(self, trace):
        assert trace(text_file_command.main) == [
            "Opening file file1.txt",
            "Saving file file1.txt",
            "Saving file file1.txt",
            "Opening file file2.txt",
            "Operations executed: 4",
        ]

    def test_executor_accepts_callables(self):
        executor = text_file_command.TextFileOperationExecutor()
        assert executor.execute_operation(lambda: "done") == "done"
        assert len(executor.operations) == 1


class TestIterator:
    def test_trace(self, trace):
        email = "Sending email to {} with message: Very important message"
        assert trace(iterator.main) == [
            "Sending spam to friends...",
            email.format("jane.doe@example.com"),
            email.format("bob.smith@example.com"),
            "Sending spam to coworkers...",
            email.format("jane.doe@example.com"),
            email.format("bob.smith@example.com"),
            "Friends: Jane Doe, Bob Smith",
        ]

    def test_iterator_is_lazy(self):
        network = iterator.Facebook()
        it = network.create_friends_iterator("1")
        assert network.requests == 0

        assert it.has_more()
        assert network.requests == 1

    def test_exhausted_iterator_returns_none(self):
        it = iterator.Facebook().create_coworkers_iterator("1")
        assert len(list(it)) == 2
        assert it.get_next() is None
        assert not it.has_more()


class TestMediator:
    def test_trace(self, trace):
        assert trace(mediator.main) == [
            "Showing login form components",
            "Hiding registration form components",
            "Trying to find a user using login credentials",
            "User not found, showing an error message above the login field",
            "Trying to find a user using login credentials",
            "Logging that user in",
            "Showing registration form components",
            "Hiding login form components",
            "Creating a user account using data from the registration fields",
            "Logging that user in",
            "Dialog title: Register",
        ]

    def test_registration_adds_user(self, capsys):
        dialog = mediator.AuthenticationDialog()
        dialog.registration_username.text = "carol"
        dialog.registration_password.text = "pw"
        dialog.ok_button.click()
        assert dialog.find_user("carol", "pw")


def test_memento_trace(trace):
    assert trace(memento.main) == [
        "Saved snapshot of editor state.",
        "Changed editor state.",
        "Editor text: Hello, Memento!",
        "Restored editor state from snapshot.",
        "Editor text: Hello, World!",
        "Cursor: (5, 0)",
    ]


class TestObserver:
    def test_trace(self, trace):
        assert trace(observer.main) == [
            "/path/to/log.txt: Someone has opened the file: test.txt",
            "Email sent to admin@example.com: Someone has changed the file: test.txt",
            "Saved again with no save listeners",
        ]

    def test_unsubscribe_stops_notifications(self, capsys):
        events = observer.EventManager()
        listener = observer.EmailAlertsListener("a@example.com", "%s")
        events.subscribe("save", listener)
        events.unsubscribe("save", listener)

        events.notify("save", "file.txt")

        assert capsys.readouterr().out == ""

    def test_notify_unknown_event_is_a_noop(self, capsys):
        observer.EventManager().notify("delete", "file.txt")
        assert capsys.readouterr().out == ""

    def test_save_without_open_file(self):
        with pytest.raises(ValueError):
            observer.Editor().save_file()


def test_number_observer_trace(trace):
    assert trace(number_observer.main) == [
        "First state change: 15",
        "Binary String: 1111",
        "Octal String: 17",
        "Hex String: F",
        "Second state change: 10",
        "Binary String: 1010",
        "Octal String: 12",
        "Hex String: A",
    ]


class TestState:
    def test_trace(self, trace):
        assert trace(state.main) == [
            "Playing Song A",
            "Next song: Song B",
            "Locked",
            "Locked, ignoring next",
            "Unlocked",
            "Previous song: Song A",
            "Paused Song A",
            "Final state: ReadyState",
        ]

    def test_transitions(self, capsys):
        player = state.AudioPlayer()
        assert isinstance(player.state, state.ReadyState)

        player.click_play()
        assert isinstance(player.state, state.PlayingState)

        player.click_lock()
        assert isinstance(player.state, state.LockedState)

        player.click_play()
        assert isinstance(player.state, state.LockedState)
        assert player.playing

        player.click_lock()
        assert isinstance(player.state, state.PlayingState)

    def test_unlock_when_stopped_returns_to_ready(self, capsys):
        player = state.AudioPlayer()
        player.click_lock()
        player.click_lock()
        assert isinstance(player.state, state.ReadyState)

    def test_previous_wraps_around(self, capsys):
        player = state.AudioPlayer(["one", "two"])
        player.click_previous()
        assert player.song == "two"


def test_context_state_trace(trace):
    assert trace(context_state.main) == [
        "Player is in start state",
        "Start State",
        "Player is in end state",
        "End State",
    ]


class TestStrategy:
    def test_trace(self, trace):
        assert trace(strategy.main) == [
            "Strategy set to Addition",
            "Result: 15",
            "Strategy set to Subtraction",
            "Result: 5",
            "Strategy set to Multiplication",
            "Result: 50",
        ]

    def test_unknown_action(self):
        with pytest.raises(ValueError, match="Unknown action: division"):
            strategy.strategy_for("division")

    def test_context_without_strategy(self):
        with pytest.raises(ValueError):
            strategy.Context().execute_strategy(1, 2)


def test_template_method_trace(trace):
    assert trace(template_method.main) == [
        "Collecting resources...",
        "Orcs building structures...",
        "Orcs building units...",
        "Orcs sending warriors to Enemy1",
        "Monsters don't collect resources.",
        "Monsters don't build structures.",
        "Monsters don't build units.",
        "Monsters don't send warriors.",
    ]


def test_template_method_sends_scouts_without_enemy(capsys):
    class PeacefulOrcs(template_method.OrcsAI):
        def closest_enemy(self):
            return None

    PeacefulOrcs().attack()
    assert capsys.readouterr().out.strip() == "Orcs sending scouts to map.center"


def test_visitor_trace(trace):
    assert trace(visitor.main) == [
        "Exporting the dot's details in XML format.",
        "Exporting the circle's details in XML format.",
        "Exporting the rectangle's details in XML format.",
        "Exporting the CompoundShape's details in XML format.",
    ]
