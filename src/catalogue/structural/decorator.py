"""Decorator: stack behaviour around a data source without subclassing it.

Each decorator adds its side effect, then forwards to the object it wraps.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class DataSource(ABC):
    @abstractmethod
    def write_data(self, data: str) -> None: ...

    @abstractmethod
    def read_data(self) -> str: ...


class FileDataSource(DataSource):
    def __init__(self, filename: str) -> None:
        self.filename = filename
        self._data = ""

    def write_data(self, data: str) -> None:
        self._data = data
        print(f"Writing data to file: {data}")

    def read_data(self) -> str:
        print("Reading data from file")
        return self._data


class DataSourceDecorator(DataSource):
    def __init__(self, source: DataSource) -> None:
        self._wrappee = source

    def write_data(self, data: str) -> None:
        self._wrappee.write_data(data)

    def read_data(self) -> str:
        return self._wrappee.read_data()


class EncryptionDecorator(DataSourceDecorator):
    def write_data(self, data: str) -> None:
        print("Encrypting data")
        super().write_data(data)

    def read_data(self) -> str:
        print("Decrypting data")
        return super().read_data()


class CompressionDecorator(DataSourceDecorator):
    def write_data(self, data: str) -> None:
        print("Compressing data")
        super().write_data(data)

    def read_data(self) -> str:
        print("Decompressing data")
        return super().read_data()


def main() -> None:
    source: DataSource = FileDataSource("somefile.dat")
    source.write_data("salaryRecords")

    source = CompressionDecorator(source)
    source.write_data("salaryRecords")

    source = EncryptionDecorator(source)
    source.write_data("salaryRecords")

    print(f"Read back: {source.read_data()}")


if __name__ == "__main__":
    main()
