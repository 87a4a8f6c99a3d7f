from typing import Iterator, Iterable


class WordProcessorInterface(object):
    def process(self, words: Iterator[str]) -> Iterator[str]:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        pass


class WordComplexProcessor(WordProcessorInterface):
    def __init__(self, processors: Iterable[WordProcessorInterface]):
        self.__processors = list(processors)

    def process(self, words: Iterator[str]) -> Iterator[str]:
        result = words
        for processor in self.__processors:
            result = processor.process(result)
        return result

    def __enter__(self):
        for processor in self.__processors:
            processor.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        for processor in self.__processors:
            processor.__exit__(exc_type, exc_val, exc_tb)
