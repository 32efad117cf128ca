"""Liskov substitution: read-only documents never pretend they can save."""

from __future__ import annotations


class Document:
    def __init__(self, filename: str, data: str = "") -> None:
        self.filename = filename
        self.data = data

    def open(self) -> None:
        print(f"Reading document: {self.filename}")


class WritableDocument(Document):
    def save(self) -> None:
        print(f"Writing document: {self.filename}")


class Project:
    def __init__(self, all_docs: list[Document], writable_docs: list[WritableDocument]) -> None:
        self.all_docs = all_docs
        self.writable_docs = writable_docs

    def open_all(self) -> None:
        for doc in self.all_docs:
            doc.open()

    def save_all(self) -> None:
        for doc in self.writable_docs:
            doc.save()


def main() -> None:
    doc1 = Document("doc1")
    doc2 = WritableDocument("doc2")

    project = Project(all_docs=[doc1, doc2], writable_docs=[doc2])
    project.open_all()
    project.save_all()


if __name__ == "__main__":
    main()
