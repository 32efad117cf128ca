"""Command as a callable: text file operations queued through an executor.

Any zero-argument callable returning a string is a valid operation, so
bound methods and lambdas work alongside the explicit command classes.
"""

from __future__ import annotations

from typing import Callable, Protocol


class TextFileOperation(Protocol):
    def execute(self) -> str: ...


class TextFile:
    def __init__(self, name: str) -> None:
        self.name = name

    def open(self) -> str:
        return f"Opening file {self.name}"

    def save(self) -> str:
        return f"Saving file {self.name}"


class TextFileOpen:
    def __init__(self, text_file: TextFile) -> None:
        self.text_file = text_file

    def execute(self) -> str:
        return self.text_file.open()


class TextFileSave:
    def __init__(self, text_file: TextFile) -> None:
        self.text_file = text_file

    def execute(self) -> str:
        return self.text_file.save()


class TextFileOperationExecutor:
    def __init__(self) -> None:
        self.operations: list[Callable[[], str]] = []

    def execute_operation(self, operation: TextFileOperation | Callable[[], str]) -> str:
        run = operation.execute if hasattr(operation, "execute") else operation
        self.operations.append(run)
        return run()


def main() -> None:
    executor = TextFileOperationExecutor()
    text_file = TextFile("file1.txt")

    print(executor.execute_operation(TextFileOpen(text_file)))
    print(executor.execute_operation(TextFileSave(text_file)))
    print(executor.execute_operation(text_file.save))
    print(executor.execute_operation(lambda: TextFile("file2.txt").open()))
    print(f"Operations executed: {len(executor.operations)}")


if __name__ == "__main__":
    main()
