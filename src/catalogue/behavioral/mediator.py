"""Mediator: form widgets only talk to the dialog, never to each other."""

from __future__ import annotations

from typing import Protocol


class Mediator(Protocol):
    def notify(self, sender: "Component", event: str) -> None: ...


class Component:
    def __init__(self, dialog: Mediator) -> None:
        self.dialog = dialog

    def click(self) -> None:
        self.dialog.notify(self, "click")

    def keypress(self) -> None:
        self.dialog.notify(self, "keypress")


class Button(Component):
    pass


class Textbox(Component):
    def __init__(self, dialog: Mediator) -> None:
        super().__init__(dialog)
        self.text = ""


class Checkbox(Component):
    def __init__(self, dialog: Mediator) -> None:
        super().__init__(dialog)
        self.checked = False

    def check(self) -> None:
        self.checked = not self.checked
        self.dialog.notify(self, "check")


class AuthenticationDialog:
    def __init__(self) -> None:
        self.title = ""
        self.login_or_register = Checkbox(self)
        self.login_username = Textbox(self)
        self.login_password = Textbox(self)
        self.registration_username = Textbox(self)
        self.registration_password = Textbox(self)
        self.registration_email = Textbox(self)
        self.ok_button = Button(self)
        self.cancel_button = Button(self)
        self.users: dict[str, str] = {"alice": "secret"}

    def find_user(self, username: str, password: str) -> bool:
        return self.users.get(username) == password

    def notify(self, sender: Component, event: str) -> None:
        if sender is self.login_or_register and event == "check":
            if self.login_or_register.checked:
                self.title = "Log in"
                print("Showing login form components")
                print("Hiding registration form components")
            else:
                self.title = "Register"
                print("Showing registration form components")
                print("Hiding login form components")

        if sender is self.ok_button and event == "click":
            if self.login_or_register.checked:
                print("Trying to find a user using login credentials")
                if self.find_user(self.login_username.text, self.login_password.text):
                    print("Logging that user in")
                else:
                    print("User not found, showing an error message above the login field")
            else:
                print("Creating a user account using data from the registration fields")
                self.users[self.registration_username.text] = self.registration_password.text
                print("Logging that user in")


def main() -> None:
    dialog = AuthenticationDialog()

    dialog.login_or_register.check()
    dialog.login_username.text = "alice"
    dialog.login_password.text = "wrong"
    dialog.ok_button.click()

    dialog.login_password.text = "secret"
    dialog.ok_button.click()

    dialog.login_or_register.check()
    dialog.registration_username.text = "bob"
    dialog.registration_password.text = "hunter2"
    dialog.ok_button.click()

    # A button the dialog does not own is ignored.
    Button(dialog).click()
    print(f"Dialog title: {dialog.title}")


if __name__ == "__main__":
    main()
