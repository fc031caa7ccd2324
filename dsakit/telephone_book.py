"""Fixed-size telephone book hashed by number, with linear probing and replacement."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import chain

SIZE = 10
_EMPTY_KEY = -1
_EMPTY_NAME = "NULL"


class TableFullError(Exception):
    """Raised when a new entry is inserted into a table with no free slot."""


@dataclass(frozen=True)
class Entry:
    """A telephone number and the client it belongs to."""

    key: int
    name: str


class TelephoneBook:
    """Hash table of ``SIZE`` slots keyed by telephone number.

    The home slot of a key is ``key % SIZE``.  When the home slot is taken by
    an entry that is itself out of place, the new entry takes the slot and the
    displaced one moves to the next free slot (replacement).  Otherwise the new
    entry goes to the next free slot, wrapping round the table.
    """

    def __init__(self):
        self._slots: list[Entry | None] = [None] * SIZE

    def __len__(self) -> int:
        return sum(entry is not None for entry in self._slots)

    def _next_free(self, home: int) -> int:
        for index in chain(range(home + 1, SIZE), range(home)):
            if self._slots[index] is None:
                return index
        raise TableFullError("hash table is full")

    def insert(self, key: int, name: str) -> int:
        """Store ``name`` under ``key`` and return the slot the key landed in."""
        if key < 0:
            raise ValueError(f"telephone number must not be negative: {key}")
        home = key % SIZE
        occupant = self._slots[home]
        entry = Entry(key, name)
        if occupant is None:
            self._slots[home] = entry
            return home
        free = self._next_free(home)
        if occupant.key % SIZE != home:
            self._slots[home] = entry
            self._slots[free] = occupant
            return home
        self._slots[free] = entry
        return free

    def find(self, key: int) -> int | None:
        """Return the slot holding ``key``, or None if it is absent."""
        return next(
            (index for index, entry in enumerate(self._slots)
             if entry is not None and entry.key == key),
            None,
        )

    def delete(self, key: int) -> Entry:
        """Remove ``key`` and return its entry; raise KeyError if absent."""
        index = self.find(key)
        if index is None:
            raise KeyError(key)
        entry = self._slots[index]
        self._slots[index] = None
        return entry

    def slots(self) -> list[Entry | None]:
        """Return a copy of the table, with None for empty slots."""
        return list(self._slots)

    def render(self) -> str:
        """Return the table as text, one slot per line."""
        lines = ["\t\tKey\t\tName"]
        for index, entry in enumerate(self._slots):
            key, name = (_EMPTY_KEY, _EMPTY_NAME) if entry is None else (entry.key, entry.name)
            lines.append(f"\th[{index}]\t{key}\t\t{name}")
        return "\n".join(lines)


def _read_key(prompt: str) -> int | None:
    text = input(prompt).strip()
    try:
        return int(text)
    except ValueError:
        print(f"\n\tInvalid Number: {text}")
        return None


def _insert_session(book: TelephoneBook) -> None:
    while True:
        if len(book) >= SIZE:
            print("\n\tHash Table is FULL")
            return
        key = _read_key("\n\tEnter a Telephone No: ")
        name = input("\n\tEnter a Client Name: ").strip()
        if key is not None:
            try:
                book.insert(key, name)
            except (ValueError, TableFullError) as error:
                print(f"\n\t{error}")
        answer = input("\n\t..... Do You Want to Insert More Key: y/n ").strip().lower()
        if answer != "y":
            return


def _report_found(book: TelephoneBook, key: int) -> bool:
    index = book.find(key)
    if index is None:
        print("\n\tKey Not Found")
        return False
    entry = book.slots()[index]
    print(f"\n\t{entry.key} is Found at {index} Location With Name {entry.name}")
    return True


def main(argv=None) -> int:
    """Run the interactive telephone book menu."""
    book = TelephoneBook()
    try:
        while True:
            print("\n\t***** Telephone Book (Dictionary ADT) *****")
            print("\n\t1. Insert\n\t2. Display\n\t3. Find\n\t4. Delete\n\t5. Exit")
            choice = input("\n\t..... Enter Your Choice: ").strip()
            if choice == "1":
                _insert_session(book)
            elif choice == "2":
                print(book.render())
            elif choice == "3":
                key = _read_key("\n\tEnter a Key Which You Want to Search: ")
                if key is not None:
                    _report_found(book, key)
            elif choice == "4":
                key = _read_key("\n\tEnter a Key Which You Want to Delete: ")
                if key is not None and _report_found(book, key):
                    book.delete(key)
                    print("\n\tKey is Deleted")
            elif choice == "5":
                print("\n\tExiting Program...")
            else:
                print("\n\tInvalid Choice!")
            answer = input("\n\t..... Do You Want to Continue in Main Menu: y/n ").strip().lower()
            if answer != "y":
                break
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())