"""Iterator: walk a social graph without exposing how it is stored.

`FacebookIterator` keeps the classic `has_more()`/`get_next()` pair and is
also a regular Python iterator.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Profile:
    id: str
    name: str
    email: str
    network: str


class ProfileIterator(ABC):
    @abstractmethod
    def has_more(self) -> bool: ...

    @abstractmethod
    def get_next(self) -> Profile | None: ...

    def __iter__(self) -> Iterator[Profile]:
        return self

    def __next__(self) -> Profile:
        profile = self.get_next()
        if profile is None:
            raise StopIteration
        return profile


class SocialNetwork(ABC):
    @abstractmethod
    def create_friends_iterator(self, profile_id: str) -> ProfileIterator: ...

    @abstractmethod
    def create_coworkers_iterator(self, profile_id: str) -> ProfileIterator: ...


class Facebook(SocialNetwork):
    def __init__(self) -> None:
        self.requests = 0

    def create_friends_iterator(self, profile_id: str) -> ProfileIterator:
        return FacebookIterator(self, profile_id, "friends")

    def create_coworkers_iterator(self, profile_id: str) -> ProfileIterator:
        return FacebookIterator(self, profile_id, "coworkers")

    def social_graph_request(self, profile_id: str, type: str) -> list[Profile]:
        self.requests += 1
        return [
            Profile("2", "Jane Doe", "jane.doe@example.com", "Facebook"),
            Profile("3", "Bob Smith", "bob.smith@example.com", "Facebook"),
        ]


class FacebookIterator(ProfileIterator):
    def __init__(self, facebook: Facebook, profile_id: str, type: str) -> None:
        self._facebook = facebook
        self._profile_id = profile_id
        self._type = type
        self._current_position = 0
        self._cache: list[Profile] | None = None

    def _lazy_init(self) -> list[Profile]:
        if self._cache is None:
            self._cache = self._facebook.social_graph_request(self._profile_id, self._type)
        return self._cache

    def has_more(self) -> bool:
        return self._current_position < len(self._lazy_init())

    def get_next(self) -> Profile | None:
        if not self.has_more():
            return None
        profile = self._lazy_init()[self._current_position]
        self._current_position += 1
        return profile


class SocialSpammer:
    def send(self, iterator: ProfileIterator, message: str) -> None:
        while iterator.has_more():
            profile = iterator.get_next()
            if profile is not None:
                print(f"Sending email to {profile.email} with message: {message}")


class Application:
    def __init__(self) -> None:
        self.network: SocialNetwork = Facebook()
        self.spammer = SocialSpammer()

    def send_spam_to_friends(self, profile: Profile) -> None:
        iterator = self.network.create_friends_iterator(profile.id)
        self.spammer.send(iterator, "Very important message")

    def send_spam_to_coworkers(self, profile: Profile) -> None:
        iterator = self.network.create_coworkers_iterator(profile.id)
        self.spammer.send(iterator, "Very important message")


def main() -> None:
    app = Application()
    profile = Profile("1", "John Doe", "john.doe@example.com", "Facebook")

    print("Sending spam to friends...")
    app.send_spam_to_friends(profile)
    print("Sending spam to coworkers...")
    app.send_spam_to_coworkers(profile)

    names = [p.name for p in app.network.create_friends_iterator(profile.id)]
    print(f"Friends: {', '.join(names)}")


if __name__ == "__main__":
    main()
