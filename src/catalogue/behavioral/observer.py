"""Observer: an editor publishes file events to whoever subscribed."""

from __future__ import annotations

from typing import Protocol


class EventListener(Protocol):
    def update(self, filename: str) -> None: ...


class EventManager:
    def __init__(self) -> None:
        self.listeners: dict[str, list[EventListener]] = {}

    def subscribe(self, event_type: str, listener: EventListener) -> None:
        self.listeners.setdefault(event_type, []).append(listener)

    def unsubscribe(self, event_type: str, listener: EventListener) -> None:
        users = self.listeners.get(event_type)
        if users and listener in users:
            users.remove(listener)

    def notify(self, event_type: str, data: str) -> None:
        for listener in list(self.listeners.get(event_type, [])):
            listener.update(data)


class Editor:
    def __init__(self) -> None:
        self.events = EventManager()
        self.file: str | None = None

    def open_file(self, path: str) -> None:
        self.file = path
        self.events.notify("open", path)

    def save_file(self) -> None:
        if self.file is None:
            raise ValueError("Please open a file first")
        self.events.notify("save", self.file)


class LoggingListener:
    def __init__(self, log: str, message: str) -> None:
        self.log = log
        self.message = message

    def update(self, filename: str) -> None:
        print(f"{self.log}: {self.message.replace('%s', filename)}")


class EmailAlertsListener:
    def __init__(self, email: str, message: str) -> None:
        self.email = email
        self.message = message

    def update(self, filename: str) -> None:
        print(f"Email sent to {self.email}: {self.message.replace('%s', filename)}")


def main() -> None:
    editor = Editor()

    logger = LoggingListener("/path/to/log.txt", "Someone has opened the file: %s")
    editor.events.subscribe("open", logger)

    email_alerts = EmailAlertsListener("admin@example.com", "Someone has changed the file: %s")
    editor.events.subscribe("save", email_alerts)

    editor.open_file("test.txt")
    editor.save_file()

    editor.events.unsubscribe("save", email_alerts)
    editor.save_file()
    print("Saved again with no save listeners")


if __name__ == "__main__":
    main()
