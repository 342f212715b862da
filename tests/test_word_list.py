import unittest

from wordsearch.core.exceptions import EmptyInputError, OutOfRangeError, WordStateError
from wordsearch.engine.word_list import WordList


class WordListTests(unittest.TestCase):
    def test_load_uppercases_and_keeps_order(self) -> None:
        words = WordList()
        words.load(["dog", "Cat", "  bird  "])
        self.assertEqual([word.text for word in words], ["DOG", "CAT", "BIRD"])
        self.assertTrue(all(not word.found for word in words))

    def test_load_text_skips_blank_lines(self) -> None:
        words = WordList()
        words.load_text("ant\r\n\r\nbee\n\n   \nwasp\n")
        self.assertEqual([word.text for word in words], ["ANT", "BEE", "WASP"])

    def test_empty_input_is_rejected(self) -> None:
        words = WordList()
        with self.assertRaises(EmptyInputError) as ctx:
            words.load_text("\n \n")
        self.assertEqual(ctx.exception.what, "word list")

    def test_mark_found_once(self) -> None:
        words = WordList(["ant", "bee"])
        words.mark_found(1)
        self.assertEqual([word.text for word in words.found_words()], ["BEE"])
        self.assertEqual([word.text for word in words.unfound_words()], ["ANT"])

    def test_duplicate_mark_found_is_an_error(self) -> None:
        words = WordList(["ant"])
        words.mark_found(0)
        with self.assertRaises(WordStateError):
            words.mark_found(0)

    def test_mark_found_rejects_bad_index(self) -> None:
        words = WordList(["ant"])
        for index in (-1, 1):
            with self.assertRaises(OutOfRangeError) as ctx:
                words.mark_found(index)
            self.assertEqual(ctx.exception.value, index)

    def test_reset_all(self) -> None:
        words = WordList(["ant", "bee"])
        words.mark_found(0)
        words.reset_all()
        self.assertEqual(words.found_words(), [])
        words.mark_found(0)
        self.assertTrue(words[0].found)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
