"""Command: editor operations as objects, with an undo history."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Editor:
    def __init__(self, text: str = "") -> None:
        self.text = text
        self.selection_start = 0
        self.selection_end = 0

    def select(self, start: int, end: int) -> None:
        self.selection_start = start
        self.selection_end = end

    def get_selection(self) -> str:
        return self.text[self.selection_start:self.selection_end]

    def delete_selection(self) -> None:
        self.replace_selection("")

    def replace_selection(self, text: str) -> None:
        self.text = self.text[: self.selection_start] + text + self.text[self.selection_end :]
        self.selection_end = self.selection_start + len(text)


class Command(ABC):
    def __init__(self, app: "Application", editor: Editor) -> None:
        self.app = app
        self.editor = editor
        self._backup = ""

    def save_backup(self) -> None:
        self._backup = self.editor.text

    def undo(self) -> None:
        self.editor.text = self._backup

    @abstractmethod
    def execute(self) -> bool:
        """Return True when the command changed the editor and belongs in history."""


class CopyCommand(Command):
    def execute(self) -> bool:
        self.app.clipboard = self.editor.get_selection()
        return False


class CutCommand(Command):
    def execute(self) -> bool:
        self.save_backup()
        self.app.clipboard = self.editor.get_selection()
        self.editor.delete_selection()
        return True


class PasteCommand(Command):
    def execute(self) -> bool:
        print("Executing PasteCommand")
        self.save_backup()
        self.editor.replace_selection(self.app.clipboard)
        return True

    def undo(self) -> None:
        print("Undoing PasteCommand")
        super().undo()


class CommandHistory:
    def __init__(self) -> None:
        self._history: list[Command] = []

    def push(self, command: Command) -> None:
        self._history.append(command)

    def pop(self) -> Command | None:
        if not self._history:
            return None
        return self._history.pop()

    def __len__(self) -> int:
        return len(self._history)


class Application:
    def __init__(self) -> None:
        self.clipboard = ""
        self.history = CommandHistory()

    def execute_command(self, command: Command | None) -> None:
        print("Executing command")
        if command is not None and command.execute():
            self.history.push(command)

    def undo(self) -> None:
        print("Undoing command")
        command = self.history.pop()
        if command is not None:
            command.undo()


def main() -> None:
    app = Application()
    editor = Editor("Hello, World!")
    editor.select(0, 5)

    app.execute_command(CopyCommand(app, editor))
    app.execute_command(CutCommand(app, editor))
    print(f"Text after cut: {editor.text!r}")
    app.execute_command(PasteCommand(app, editor))
    print(f"Text after paste: {editor.text!r}")

    app.undo()
    print(f"Text after undo: {editor.text!r}")


if __name__ == "__main__":
    main()
