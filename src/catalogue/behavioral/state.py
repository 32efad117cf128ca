"""State: an audio player whose buttons behave differently per state.

The player owns a state object and forwards every click to it; states swap
themselves out through `AudioPlayer.change_state`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class State(ABC):
    def __init__(self, player: "AudioPlayer") -> None:
        self.player = player

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def click_lock(self) -> None: ...

    @abstractmethod
    def click_play(self) -> None: ...

    @abstractmethod
    def click_next(self) -> None: ...

    @abstractmethod
    def click_previous(self) -> None: ...


class AudioPlayer:
    def __init__(self, playlist: list[str] | None = None) -> None:
        self.playlist = playlist or ["Song A", "Song B", "Song C"]
        self.current_song = 0
        self.playing = False
        self.state: State = ReadyState(self)

    def change_state(self, state: State) -> None:
        self.state = state

    def click_lock(self) -> None:
        self.state.click_lock()

    def click_play(self) -> None:
        self.state.click_play()

    def click_next(self) -> None:
        self.state.click_next()

    def click_previous(self) -> None:
        self.state.click_previous()

    @property
    def song(self) -> str:
        return self.playlist[self.current_song]

    def start_playback(self) -> None:
        self.playing = True
        print(f"Playing {self.song}")

    def stop_playback(self) -> None:
        self.playing = False
        print(f"Paused {self.song}")

    def next_song(self) -> None:
        self.current_song = (self.current_song + 1) % len(self.playlist)
        print(f"Next song: {self.song}")

    def previous_song(self) -> None:
        self.current_song = (self.current_song - 1) % len(self.playlist)
        print(f"Previous song: {self.song}")


class LockedState(State):
    def click_lock(self) -> None:
        if self.player.playing:
            self.player.change_state(PlayingState(self.player))
        else:
            self.player.change_state(ReadyState(self.player))
        print("Unlocked")

    def click_play(self) -> None:
        print("Locked, ignoring play")

    def click_next(self) -> None:
        print("Locked, ignoring next")

    def click_previous(self) -> None:
        print("Locked, ignoring previous")


class ReadyState(State):
    def click_lock(self) -> None:
        self.player.change_state(LockedState(self.player))
        print("Locked")

    def click_play(self) -> None:
        self.player.start_playback()
        self.player.change_state(PlayingState(self.player))

    def click_next(self) -> None:
        self.player.next_song()

    def click_previous(self) -> None:
        self.player.previous_song()


class PlayingState(State):
    def click_lock(self) -> None:
        self.player.change_state(LockedState(self.player))
        print("Locked")

    def click_play(self) -> None:
        self.player.stop_playback()
        self.player.change_state(ReadyState(self.player))

    def click_next(self) -> None:
        self.player.next_song()

    def click_previous(self) -> None:
        self.player.previous_song()


def main() -> None:
    player = AudioPlayer()
    player.click_play()
    player.click_next()
    player.click_lock()
    player.click_next()
    player.click_lock()
    player.click_previous()
    player.click_play()
    print(f"Final state: {player.state.name}")


if __name__ == "__main__":
    main()
