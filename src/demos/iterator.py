"""Iterator: access elements sequentially without exposing the structure."""

from typing import Iterator, List


class ArrayPlaylist:
    def __init__(self):
        self._songs = ["Song A", "Song B", "Song C"]

    def get_songs(self) -> List[str]:
        # Hands out the internal list itself
        return self._songs


def before() -> None:
    print("IteratorBefore:")
    songs = ArrayPlaylist().get_songs()
    for i in range(len(songs)):
        print(f"  Playing: {songs[i]}")


class Playlist:
    """Iterable playlist; storage stays private."""

    def __init__(self):
        self._songs = ["Song A", "Song B", "Song C"]

    def __iter__(self) -> Iterator[str]:
        yield from self._songs


def after() -> None:
    print("IteratorAfter:")
    for song in Playlist():
        print(f"  Playing: {song}")
