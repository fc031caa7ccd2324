import builtins

import pytest

from dsakit.book_tree import BookNode, main, read_book, render_book


def _asker(answers):
    it = iter(answers)
    return lambda prompt: next(it)


ANSWERS = ["Algorithms", "2", "Sorting", "2", "Quicksort", "Mergesort", "Graphs", "0"]


def test_read_book_structure():
    book = read_book(_asker(ANSWERS))
    assert book == BookNode(
        "Algorithms",
        [
            BookNode("Sorting", [BookNode("Quicksort"), BookNode("Mergesort")]),
            BookNode("Graphs", []),
        ],
    )


def test_read_book_prompts_use_chapter_name():
    prompts = []
    answers = iter(["T", "1", "Intro", "0"])

    def ask(prompt):
        prompts.append(prompt)
        return next(answers)

    book = read_book(ask)
    assert book == BookNode("T", [BookNode("Intro", [])])
    assert "Enter number of sections in Chapter Intro : " in prompts


def test_render_book():
    lines = render_book(read_book(_asker(ANSWERS))).split("\n")
    assert lines[0] == "----- Book Hierarchy -----"
    assert lines[1] == "Book Title: Algorithms"
    assert lines[2] == "  Chapter 1: Sorting"
    assert lines[3] == "    Sections:"
    assert lines[4] == "      - Quicksort"
    assert lines[-2:] == ["  Chapter 2: Graphs", "    Sections:"]


def test_render_no_book():
    assert render_book(None) == ""


@pytest.mark.parametrize("count", ["11", "-1", "many"])
def test_bad_counts_rejected(count):
    with pytest.raises(ValueError):
        read_book(_asker(["T", count]))


def test_main_create_and_display(monkeypatch, capsys):
    answers = iter(["1", "Book", "1", "Ch", "1", "Sec", "2", "3"])
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Book Title: Book" in out
    assert "      - Sec" in out
    assert "Thanks for using this program!" in out