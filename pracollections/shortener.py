"""URL shortener storing links in an open-addressing hash table."""

from __future__ import annotations

import argparse
import random
import string
import time
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple, Union

KEY_LENGTH = 7
DEFAULT_CAPACITY = 100
BASE_URL = "https://short.example/"

_DELETED = object()

_Slot = Union[None, Tuple[str, str], object]


class UrlShortener:
    """Maps random seven-character keys to URLs using linear probing."""

    def __init__(
        self, capacity: int = DEFAULT_CAPACITY, rng: Optional[random.Random] = None
    ) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._slots: List[_Slot] = [None] * capacity
        self._count = 0
        self._rng = rng if rng is not None else random.Random()

    @property
    def capacity(self) -> int:
        """Number of slots in the table."""
        return len(self._slots)

    def generate_key(self) -> str:
        """Return a random key of letters (either case) and digits."""
        chars = []
        for _ in range(KEY_LENGTH):
            if self._rng.randrange(2):
                letters = (
                    string.ascii_uppercase
                    if self._rng.randrange(2)
                    else string.ascii_lowercase
                )
                chars.append(letters[self._rng.randrange(26)])
            else:
                chars.append(string.digits[self._rng.randrange(10)])
        return "".join(chars)

    def _hash(self, key: str) -> int:
        numeric = int("".join(str(ord(ch)) for ch in key))
        return numeric % len(self._slots)

    def _probe(self, key: str) -> Iterator[int]:
        start = self._hash(key)
        size = len(self._slots)
        return ((start + offset) % size for offset in range(size))

    def _index_of(self, key: str) -> Optional[int]:
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None:
                return None
            if slot is not _DELETED and slot[0] == key:  # type: ignore[index]
                return index
        return None

    @staticmethod
    def _validate(key: str) -> None:
        if len(key) != KEY_LENGTH or not (key.isascii() and key.isalnum()):
            raise ValueError(f"invalid key: {key!r}")

    def add(self, url: str) -> str:
        """Store ``url`` under a fresh key and return the key."""
        if self._count >= len(self._slots):
            raise RuntimeError("the table is full")
        key = self.generate_key()
        while self._index_of(key) is not None:
            key = self.generate_key()
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None or slot is _DELETED:
                self._slots[index] = (key, url)
                self._count += 1
                return key
        raise RuntimeError("the table is full")

    def lookup(self, key: str) -> str:
        """Return the URL stored under ``key``; raise KeyError if absent."""
        self._validate(key)
        index = self._index_of(key)
        if index is None:
            raise KeyError(key)
        return self._slots[index][1]  # type: ignore[index]

    def remove(self, key: str) -> str:
        """Delete ``key`` and return its URL; raise KeyError if absent."""
        self._validate(key)
        index = self._index_of(key)
        if index is None:
            raise KeyError(key)
        url = self._slots[index][1]  # type: ignore[index]
        self._slots[index] = _DELETED
        self._count -= 1
        return url

    def load_file(self, path: Union[str, Path], output: Union[str, Path]) -> List[str]:
        """Add every non-blank line of ``path`` as a URL.

        The short link of each is written, one per line, to ``output``;
        the new keys are returned in file order.
        """
        keys: List[str] = []
        with open(path, encoding="utf-8") as source, open(
            output, "w", encoding="utf-8"
        ) as target:
            for line in source:
                url = line.strip()
                if not url:
                    continue
                key = self.add(url)
                keys.append(key)
                target.write(f"{BASE_URL}{key}\n")
        return keys

    def stored_urls(self) -> Iterator[str]:
        """Yield the stored URLs in table order."""
        for slot in self._slots:
            if slot is not None and slot is not _DELETED:
                yield slot[1]  # type: ignore[index]

    def __len__(self) -> int:
        return self._count


_MENU = """
Choose one of 7 options:

1: Add URL                     2: Add URLs from a file
3: Look up URL by key          4: Remove URL
5: Number of stored URLs       6: Print stored URLs
7: Quit
"""


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive shortener menu."""
    parser = argparse.ArgumentParser(description="Shorten URLs with a hash table.")
    parser.add_argument("--capacity", type=int, default=DEFAULT_CAPACITY)
    parser.add_argument("--output", default="shortened.txt")
    args = parser.parse_args(argv)
    if args.capacity < 1:
        parser.error("capacity must be positive")

    shortener = UrlShortener(args.capacity)
    print("*" * 40)
    print("URL SHORTENER")
    print("*" * 40)
    try:
        while True:
            print(_MENU)
            choice = input("Choose: ").strip()
            try:
                if choice == "1":
                    key = shortener.add(input("URL to add: ").strip())
                    print(f"Short link: {BASE_URL}{key}")
                elif choice == "2":
                    path = input("File with the links: ").strip()
                    start = time.perf_counter()
                    keys = shortener.load_file(path, args.output)
                    elapsed = time.perf_counter() - start
                    print(f"Added {len(keys)} URLs in {elapsed:.3f} s")
                elif choice == "3":
                    key = input("Key to look up: ").strip()
                    print(f"The link with key {key} is: {shortener.lookup(key)}")
                elif choice == "4":
                    key = input("Key of the URL to remove: ").strip()
                    shortener.remove(key)
                    print("Removed")
                elif choice == "5":
                    print(f"Number of stored URLs: {len(shortener)}")
                elif choice == "6":
                    for url in shortener.stored_urls():
                        print(url)
                elif choice == "7":
                    print("Exiting...")
                    return 0
                else:
                    print("Invalid option")
            except KeyError as exc:
                print(f"Key not found: {exc.args[0]}")
            except (ValueError, RuntimeError, OSError) as exc:
                print(f"Error: {exc}")
    except EOFError:
        return 0