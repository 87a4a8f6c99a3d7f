from typing import Callable, TextIO, Generator, Iterable

from io import StringIO


########## reader ##########


class VocabularyReader(object):
    """
    Reads one word per line.

    Empty lines are kept as empty words so that two line-aligned files stay aligned.
    The file is opened on the first iteration and closed when the generator finishes or is closed.
    """

    def __init__(self, strip_spaces: bool = False):
        self.__strip_spaces = strip_spaces

    def read_from_file(self, file_name: str) -> Generator[str, None, None]:
        return self._read(lambda: open(file_name, encoding="utf-8"))

    def read_from_str(self, text: str) -> Generator[str, None, None]:
        return self._read(lambda: StringIO(text))

    def _read(self, open_file: Callable[[], TextIO]) -> Generator[str, None, None]:
        with open_file() as file:
            for line in file:
                line = line.strip("\r\n")
                if self.__strip_spaces:
                    line = line.strip()
                yield line


########## writer ##########


class VocabularyWriter(object):

    def write_to_file(self, file_name: str, words: Iterable[str]) -> None:
        with open(file_name, 'w', encoding="utf-8") as file:
            self._write(file, words)

    def write_to_str(self, words: Iterable[str]) -> str:
        with StringIO() as file:
            self._write(file, words)
            return file.getvalue()

    def _write(self, file: TextIO, words: Iterable[str]) -> None:
        for word in words:
            file.write(word)
            file.write("\n")
