from typing import Iterator

from stemdigger.processor import WordProcessorInterface


class StemmerInterface(WordProcessorInterface):

    def process(self, words: Iterator[str]) -> Iterator[str]:
        return self.stem(words)

    def stem(self, words: Iterator[str]) -> Iterator[str]:
        pass


class StubStemmer(StemmerInterface):

    def stem(self, words: Iterator[str]) -> Iterator[str]:
        return iter(words)

    def __str__(self):
        return "stub"
