"""Singleton with double-checked locking.

The first call to `Admin.instance()` fixes the account; later calls return
it regardless of their arguments.
"""

from __future__ import annotations

import threading


class Actor:
    def __init__(self) -> None:
        self.name: str | None = None
        self.password: str | None = None


class Admin(Actor):
    _instance: "Admin | None" = None
    _lock = threading.Lock()

    @classmethod
    def instance(cls, name: str, password: str) -> "Admin":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    admin = cls()
                    admin.name = name
                    admin.password = password
                    cls._instance = admin
        return cls._instance

    @staticmethod
    def check_admin(name: str, password: str) -> bool:
        return name == "Admin" and password == "admin"


def main() -> None:
    first = Admin.instance("Admin", "admin")
    second = Admin.instance("Intruder", "letmein")

    print(f"Admin name: {second.name}")
    print(f"Same instance: {first is second}")
    print(f"Admin/admin is valid: {Admin.check_admin('Admin', 'admin')}")
    print(f"guest/guest is valid: {Admin.check_admin('guest', 'guest')}")


if __name__ == "__main__":
    main()
