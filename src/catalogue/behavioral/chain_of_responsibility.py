"""Chain of Responsibility: contextual help bubbles up the widget tree.

A component shows its own help if it has any, otherwise it asks its
container, and so on up to the dialog.
"""

from __future__ import annotations


class Component:
    def __init__(self, tooltip_text: str | None = None) -> None:
        self.tooltip_text = tooltip_text
        self.container: Container | None = None

    def show_help(self) -> None:
        if self.tooltip_text is not None:
            print(self.tooltip_text)
        elif self.container is not None:
            self.container.show_help()


class Container(Component):
    def __init__(self) -> None:
        super().__init__()
        self.children: list[Component] = []

    def add(self, child: Component) -> None:
        self.children.append(child)
        child.container = self


class Button(Component):
    pass


class Panel(Container):
    def __init__(self, modal_help_text: str | None) -> None:
        super().__init__()
        self.modal_help_text = modal_help_text

    def show_help(self) -> None:
        if self.modal_help_text is not None:
            print(self.modal_help_text)
        else:
            super().show_help()


class Dialog(Container):
    def __init__(self, wiki_page_url: str | None) -> None:
        super().__init__()
        self.wiki_page_url = wiki_page_url

    def show_help(self) -> None:
        if self.wiki_page_url is not None:
            print(f"Opening wiki page: {self.wiki_page_url}")
        else:
            super().show_help()


def main() -> None:
    dialog = Dialog("http://wiki.example.com/dialog")
    panel = Panel("This panel does...")
    ok_button = Button("This is an OK button that...")
    cancel_button = Button("This is a Cancel button that...")
    unlabeled_button = Button()
    plain_panel = Panel(None)
    footer_button = Button()

    panel.add(ok_button)
    panel.add(cancel_button)
    panel.add(unlabeled_button)
    plain_panel.add(footer_button)
    dialog.add(panel)
    dialog.add(plain_panel)

    # F1 pressed on each button in turn.
    ok_button.show_help()
    unlabeled_button.show_help()
    footer_button.show_help()


if __name__ == "__main__":
    main()
