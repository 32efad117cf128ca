"""Facade: one `convert` call in front of a video framework's many classes."""

from __future__ import annotations

from pathlib import Path


class VideoFile:
    def __init__(self, filename: str) -> None:
        self.filename = filename
        print(f"VideoFile created: {filename}")


class Codec:
    pass


class OggCompressionCodec(Codec):
    def __init__(self) -> None:
        print("OggCompressionCodec created")


class MPEG4CompressionCodec(Codec):
    def __init__(self) -> None:
        print("MPEG4CompressionCodec created")


class CodecFactory:
    @staticmethod
    def extract(file: VideoFile) -> Codec:
        print("CodecFactory extracting codec")
        return Codec()


class BitrateReader:
    @staticmethod
    def read(filename: str, source_codec: Codec) -> bytes:
        print("BitrateReader reading file with codec")
        return b""

    @staticmethod
    def convert(buffer: bytes, destination_codec: Codec) -> bytes:
        print("BitrateReader converting bitrate")
        return buffer


class AudioMixer:
    def fix(self, result: bytes) -> bytes:
        print("AudioMixer fixing audio")
        return result


class VideoConverter:
    """The facade. Clients never touch the classes above directly."""

    def convert(self, filename: str, format: str) -> Path:
        file = VideoFile(filename)
        source_codec = CodecFactory.extract(file)
        destination_codec: Codec
        if format == "mp4":
            destination_codec = MPEG4CompressionCodec()
        else:
            destination_codec = OggCompressionCodec()
        buffer = BitrateReader.read(filename, source_codec)
        result = BitrateReader.convert(buffer, destination_codec)
        result = AudioMixer().fix(result)
        print("VideoConverter: conversion complete.")
        return Path(f"output.{format}")


def main() -> None:
    converter = VideoConverter()
    mp4 = converter.convert("funny-cats-video.ogg", "mp4")
    print(f"Saved file: {mp4.name}")


if __name__ == "__main__":
    main()
