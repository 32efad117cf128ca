"""Memento: the editor hands out snapshots only it knows how to restore."""

from __future__ import annotations


class Editor:
    def __init__(self) -> None:
        self.text = ""
        self.cur_x = 0
        self.cur_y = 0
        self.selection_width = 0

    def set_text(self, text: str) -> None:
        self.text = text

    def set_cursor(self, x: int, y: int) -> None:
        self.cur_x = x
        self.cur_y = y

    def set_selection_width(self, width: int) -> None:
        self.selection_width = width

    def create_snapshot(self) -> "Snapshot":
        return Snapshot(self, self.text, self.cur_x, self.cur_y, self.selection_width)


class Snapshot:
    def __init__(self, editor: Editor, text: str, cur_x: int, cur_y: int, selection_width: int) -> None:
        self._editor = editor
        self._text = text
        self._cur_x = cur_x
        self._cur_y = cur_y
        self._selection_width = selection_width

    def restore(self) -> None:
        self._editor.set_text(self._text)
        self._editor.set_cursor(self._cur_x, self._cur_y)
        self._editor.set_selection_width(self._selection_width)


class Command:
    def __init__(self) -> None:
        self._backup: Snapshot | None = None

    def make_backup(self, editor: Editor) -> None:
        self._backup = editor.create_snapshot()

    def undo(self) -> None:
        if self._backup is not None:
            self._backup.restore()


def main() -> None:
    editor = Editor()
    command = Command()

    editor.set_text("Hello, World!")
    editor.set_cursor(5, 0)
    command.make_backup(editor)
    print("Saved snapshot of editor state.")

    editor.set_text("Hello, Memento!")
    editor.set_cursor(14, 0)
    print("Changed editor state.")
    print(f"Editor text: {editor.text}")

    command.undo()
    print("Restored editor state from snapshot.")
    print(f"Editor text: {editor.text}")
    print(f"Cursor: ({editor.cur_x}, {editor.cur_y})")


if __name__ == "__main__":
    main()
