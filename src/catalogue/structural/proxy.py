"""Proxy: a caching stand-in for a slow third-party video service."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ThirdPartyYouTubeLib(ABC):
    @abstractmethod
    def list_videos(self) -> list[str]: ...

    @abstractmethod
    def get_video_info(self, video_id: str) -> dict[str, str]: ...

    @abstractmethod
    def download_video(self, video_id: str) -> None: ...


class ThirdPartyYouTubeClass(ThirdPartyYouTubeLib):
    def list_videos(self) -> list[str]:
        print("Sending an API request to YouTube.")
        return ["videoId"]

    def get_video_info(self, video_id: str) -> dict[str, str]:
        print("Getting metadata about some video.")
        return {"id": video_id, "title": "Funny cats"}

    def download_video(self, video_id: str) -> None:
        print("Downloading a video file from YouTube.")


class CachedYouTubeClass(ThirdPartyYouTubeLib):
    """Same interface as the service; answers repeats from memory."""

    def __init__(self, service: ThirdPartyYouTubeLib) -> None:
        self._service = service
        self._list_cache: list[str] | None = None
        self._video_cache: dict[str, dict[str, str]] = {}
        self._downloaded: set[str] = set()
        self.need_reset = False

    def list_videos(self) -> list[str]:
        if self._list_cache is None or self.need_reset:
            self._list_cache = self._service.list_videos()
            print("Caching video list.")
        print("Returning cached video list.")
        return self._list_cache

    def get_video_info(self, video_id: str) -> dict[str, str]:
        if video_id not in self._video_cache or self.need_reset:
            self._video_cache[video_id] = self._service.get_video_info(video_id)
            print("Caching video info.")
        print("Returning cached video info.")
        return self._video_cache[video_id]

    def download_video(self, video_id: str) -> None:
        if video_id not in self._downloaded or self.need_reset:
            self._service.download_video(video_id)
            self._downloaded.add(video_id)


class YouTubeManager:
    def __init__(self, service: ThirdPartyYouTubeLib) -> None:
        self.service = service

    def render_video_page(self, video_id: str) -> None:
        self.service.get_video_info(video_id)
        print("Rendering the video page.")

    def render_list_panel(self) -> None:
        self.service.list_videos()
        print("Rendering the list of video thumbnails.")

    def react_on_user_input(self) -> None:
        self.render_video_page("videoId")
        self.render_list_panel()


def main() -> None:
    service = ThirdPartyYouTubeClass()
    proxy = CachedYouTubeClass(service)
    manager = YouTubeManager(proxy)
    manager.react_on_user_input()
    manager.react_on_user_input()


if __name__ == "__main__":
    main()
