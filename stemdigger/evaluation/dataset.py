from typing import Iterator, Tuple

from itertools import zip_longest

from stemdigger.evaluation.vocabulary_io import VocabularyReader


class VocabularyDataSet(object):
    """
    Pairs of (word, expected stem) read from two line-aligned files
    """

    def __init__(self, words_file: str, expected_file: str, reader: VocabularyReader = VocabularyReader()):
        self._reader = reader
        self._words_file = words_file
        self._expected_file = expected_file

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        words = self._reader.read_from_file(self._words_file)
        expected = self._reader.read_from_file(self._expected_file)
        try:
            for line, (word, stem) in enumerate(zip_longest(words, expected), 1):
                if word is None or stem is None:
                    raise ValueError("'{}' and '{}' are not aligned at line {}".format(
                        self._words_file, self._expected_file, line))
                yield word, stem
        finally:
            # both readers hold open files until exhausted
            words.close()
            expected.close()
