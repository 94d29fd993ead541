"""Proxy: control access to another object."""

from abc import ABC, abstractmethod
from typing import Optional


class HeavyImage:
    def __init__(self, filename: str):
        self._filename = filename
        # Always loads immediately, even if never displayed
        self._load_from_disk()

    def _load_from_disk(self) -> None:
        print(f"  Loading {self._filename} from disk...")

    def display(self) -> None:
        print(f"  Displaying {self._filename}")


def before() -> None:
    print("ProxyBefore:")
    HeavyImage("photo.jpg")


class Image(ABC):
    @abstractmethod
    def display(self) -> None:
        ...


class RealImage(Image):
    def __init__(self, filename: str):
        self._filename = filename
        self._load_from_disk()

    def _load_from_disk(self) -> None:
        print(f"  Loading {self._filename} from disk...")

    def display(self) -> None:
        print(f"  Displaying {self._filename}")


class ImageProxy(Image):
    """Virtual proxy: loads the real image on first display."""

    def __init__(self, filename: str):
        self._filename = filename
        self._real_image: Optional[RealImage] = None

    def display(self) -> None:
        if self._real_image is None:
            self._real_image = RealImage(self._filename)
        self._real_image.display()


def after() -> None:
    print("ProxyAfter:")
    image: Image = ImageProxy("photo.jpg")
    print("  (Image not loaded yet)")
    image.display()
