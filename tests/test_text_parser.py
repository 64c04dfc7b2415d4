import unittest

from toc_builder.ids import SequentialIdGenerator
from toc_builder.model import TocDocument
from toc_builder.parser import parse_text


def _titles(doc: TocDocument) -> list:
    return [
        (
            chapter.title,
            [(section.title, [sub.title for sub in section.children]) for section in chapter.children],
        )
        for chapter in doc.chapters
    ]


class ParseTextTests(unittest.TestCase):
    def test_parses_three_levels(self) -> None:
        text = """Chapter 1. Preface
  1.1 Report Description and Scope
  1.2 Research methodology
    1.2.1 Market Research Type
    1.2.2 Market research methodology
Chapter 2. Executive Summary
  2.1 Global Market
"""
        doc = parse_text(text)

        self.assertEqual(_titles(doc), [
            ("Preface", [
                ("Report Description and Scope", []),
                ("Research methodology", ["Market Research Type", "Market research methodology"]),
            ]),
            ("Executive Summary", [("Global Market", [])]),
        ])

    def test_empty_and_blank_input_yield_empty_document(self) -> None:
        self.assertEqual(parse_text("").chapters, ())
        self.assertEqual(parse_text("   \n\n").chapters, ())

    def test_numeric_chapter_without_keyword(self) -> None:
        doc = parse_text("1. Introduction\n  1.1 Background")

        self.assertEqual(_titles(doc), [("Introduction", [("Background", [])])])

    def test_chapter_keyword_is_case_insensitive(self) -> None:
        doc = parse_text("CHAPTER 3. Outlook")

        self.assertEqual([chapter.title for chapter in doc.chapters], ["Outlook"])

    def test_section_with_four_spaces_is_dropped(self) -> None:
        two_spaces = parse_text("Chapter 1. Intro\n  1.1 Scope")
        four_spaces = parse_text("Chapter 1. Intro\n    1.1 Scope")

        self.assertEqual(len(two_spaces.chapters[0].children), 1)
        self.assertEqual(four_spaces.chapters[0].children, ())

    def test_three_space_subsection_is_dropped(self) -> None:
        doc = parse_text("Chapter 1. Intro\n  1.1 Scope\n   1.1.1 Detail")

        self.assertEqual(doc.chapters[0].children[0].children, ())

    def test_orphan_lines_are_dropped(self) -> None:
        text = """  1.1 Orphan section
    1.1.1 Orphan subsection
Chapter 1. Intro
    1.1.1 Subsection without section
not an outline line
"""
        doc = parse_text(text)

        self.assertEqual(_titles(doc), [("Intro", [])])

    def test_indented_chapter_is_dropped(self) -> None:
        doc = parse_text(" Chapter 1. Intro")

        self.assertEqual(doc.chapters, ())

    def test_new_chapter_resets_current_section(self) -> None:
        text = """Chapter 1. One
  1.1 Section
Chapter 2. Two
    2.1.1 Should not attach to 1.1
"""
        doc = parse_text(text)

        self.assertEqual(doc.chapters[0].children[0].children, ())
        self.assertEqual(doc.chapters[1].children, ())

    def test_embedded_numbers_are_not_validated(self) -> None:
        doc = parse_text("Chapter 7. Seven\n  3.9 Misnumbered")

        self.assertEqual(_titles(doc), [("Seven", [("Misnumbered", [])])])

    def test_ids_come_from_injected_generator(self) -> None:
        doc = parse_text("Chapter 1. A\n  1.1 B\n    1.1.1 C", id_generator=SequentialIdGenerator("n"))

        chapter = doc.chapters[0]
        self.assertEqual(chapter.id, "n-1")
        self.assertEqual(chapter.children[0].id, "n-2")
        self.assertEqual(chapter.children[0].children[0].id, "n-3")

    def test_reparsing_gives_same_shape_with_new_ids(self) -> None:
        text = "Chapter 1. A\n  1.1 B"
        first = parse_text(text)
        second = parse_text(text)

        self.assertEqual(_titles(first), _titles(second))
        self.assertNotEqual(first.chapters[0].id, second.chapters[0].id)

    def test_only_newline_separates_lines(self) -> None:
        doc = parse_text("Chapter 1. A\x0bB\n  1.1 C")

        self.assertEqual(_titles(doc), [("A\x0bB", [("C", [])])])

    def test_trailing_whitespace_is_ignored(self) -> None:
        doc = parse_text("Chapter 1. Intro   \r\n  1.1 Scope\t")

        self.assertEqual(_titles(doc), [("Intro", [("Scope", [])])])


if __name__ == "__main__":
    unittest.main()
