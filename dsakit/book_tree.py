"""A book as a tree of chapters and sections."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

MAX_CHILDREN = 10


@dataclass
class BookNode:
    """A titled node: a book, a chapter or a section."""

    label: str
    children: list[BookNode] = field(default_factory=list)


def _count(text: str) -> int:
    count = int(text.strip())
    if not 0 <= count <= MAX_CHILDREN:
        raise ValueError(f"count must be between 0 and {MAX_CHILDREN}: {count}")
    return count


def read_book(ask: Callable[[str], str]) -> BookNode:
    """Build a book tree from answers given by ``ask(prompt)``."""
    book = BookNode(ask("Enter name of book : "))
    chapters = _count(ask("Enter number of chapters in book : "))
    for chapter_no in range(1, chapters + 1):
        chapter = BookNode(ask(f"Enter the name of Chapter {chapter_no} : "))
        sections = _count(ask(f"Enter number of sections in Chapter {chapter.label} : "))
        chapter.children = [
            BookNode(ask(f"Enter Name of Section {section_no} : "))
            for section_no in range(1, sections + 1)
        ]
        book.children.append(chapter)
    return book


def render_book(book: BookNode | None) -> str:
    """Return the book hierarchy as text; an empty string for no book."""
    if book is None:
        return ""
    lines = ["----- Book Hierarchy -----", f"Book Title: {book.label}"]
    for chapter_no, chapter in enumerate(book.children, start=1):
        lines.append(f"  Chapter {chapter_no}: {chapter.label}")
        lines.append("    Sections:")
        lines.extend(f"      - {section.label}" for section in chapter.children)
    return "\n".join(lines)


def main(argv=None) -> int:
    """Run the interactive book tree menu."""
    book = None
    try:
        while True:
            print("\n-----------------------------")
            print("       Book Tree Menu        ")
            print("-----------------------------")
            print("1. Create Book Structure")
            print("2. Display Book Structure")
            print("3. Quit")
            choice = input("Enter your choice: ").strip()
            if choice == "1":
                try:
                    book = read_book(input)
                except ValueError as error:
                    print(f"Invalid input: {error}")
            elif choice == "2":
                print(render_book(book))
            elif choice == "3":
                print("Thanks for using this program!")
                return 0
            else:
                print("Invalid choice! Please try again.")
    except EOFError:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())