"""Bridge: remotes (abstraction) and devices (implementation) vary independently."""

from __future__ import annotations


class Device:
    """Implementation side: everything a remote may ask of a device."""

    label = "Device"

    def __init__(self, volume: int) -> None:
        self._on = False
        self._volume = volume
        self._channel = 1

    def is_enabled(self) -> bool:
        return self._on

    def enable(self) -> None:
        self._on = True
        print(f"{self.label} is enabled")

    def disable(self) -> None:
        self._on = False
        print(f"{self.label} is disabled")

    @property
    def volume(self) -> int:
        return self._volume

    def set_volume(self, percent: int) -> None:
        self._volume = max(0, min(100, percent))
        print(f"{self.label} volume set to {self._volume}")

    @property
    def channel(self) -> int:
        return self._channel

    def set_channel(self, channel: int) -> None:
        self._channel = channel
        print(f"{self.label} channel set to {self._channel}")


class Tv(Device):
    label = "TV"

    def __init__(self) -> None:
        super().__init__(volume=30)


class Radio(Device):
    label = "Radio"

    def __init__(self) -> None:
        super().__init__(volume=50)


class RemoteControl:
    def __init__(self, device: Device) -> None:
        self.device = device

    def toggle_power(self) -> None:
        if self.device.is_enabled():
            self.device.disable()
            print("Powering down")
        else:
            self.device.enable()
            print("Powering up")

    def volume_down(self) -> None:
        self.device.set_volume(self.device.volume - 10)
        print("Volume down")

    def volume_up(self) -> None:
        self.device.set_volume(self.device.volume + 10)
        print("Volume up")

    def channel_down(self) -> None:
        self.device.set_channel(self.device.channel - 1)
        print("Channel down")

    def channel_up(self) -> None:
        self.device.set_channel(self.device.channel + 1)
        print("Channel up")


class AdvancedRemoteControl(RemoteControl):
    def mute(self) -> None:
        self.device.set_volume(0)
        print("Muted")


def main() -> None:
    tv = Tv()
    remote = RemoteControl(tv)
    remote.toggle_power()
    remote.channel_up()

    radio = Radio()
    advanced = AdvancedRemoteControl(radio)
    advanced.toggle_power()
    advanced.volume_up()
    advanced.mute()
    advanced.toggle_power()


if __name__ == "__main__":
    main()
