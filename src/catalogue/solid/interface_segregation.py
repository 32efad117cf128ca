"""Interface segregation: storage, hosting and CDN are separate protocols.

Dropbox only implements storage, so it has nothing to refuse.
"""

from __future__ import annotations

from typing import Protocol


class CloudStorageProvider(Protocol):
    def store_file(self, name: str) -> None: ...

    def get_file(self, name: str) -> str: ...


class CloudHostingProvider(Protocol):
    def create_server(self, region: str) -> None: ...

    def list_servers(self, region: str) -> str: ...


class CDNProvider(Protocol):
    def get_cdn_address(self) -> str: ...


class Amazon:
    def store_file(self, name: str) -> None:
        print(f"Amazon storing file: {name}")

    def get_file(self, name: str) -> str:
        print(f"Amazon getting file: {name}")
        return name

    def create_server(self, region: str) -> None:
        print(f"Amazon creating server in region: {region}")

    def list_servers(self, region: str) -> str:
        print(f"Amazon listing servers in region: {region}")
        return region

    def get_cdn_address(self) -> str:
        print("Amazon getting CDN address")
        return "Amazon CDN address"


class Dropbox:
    def store_file(self, name: str) -> None:
        print(f"Dropbox storing file: {name}")

    def get_file(self, name: str) -> str:
        print(f"Dropbox getting file: {name}")
        return name


def backup(storage: CloudStorageProvider, name: str) -> str:
    storage.store_file(name)
    return storage.get_file(name)


def main() -> None:
    amazon = Amazon()
    backup(amazon, "file1")
    amazon.create_server("us-west-2")
    amazon.list_servers("us-west-2")
    amazon.get_cdn_address()

    backup(Dropbox(), "file2")


if __name__ == "__main__":
    main()
