from typing import List

import argparse
import re
import sys

from stemdigger.processor import WordProcessorInterface
from stemdigger.porter import PorterStemmer
from stemdigger.evaluation.stemmers import get_stemmer, stemmer_names

_WORD_CHAR = re.compile(r"\w")


def split_words(argument: str) -> List[str]:
    return argument.split()


def word_at(text: str, offset: int) -> str:
    """
    Word touching the cursor position ``offset`` (the character before the cursor counts too)
    """
    if not 0 <= offset <= len(text):
        raise IndexError("offset {} is outside of text of length {}".format(offset, len(text)))
    start = offset
    while start > 0 and _WORD_CHAR.match(text[start - 1]):
        start -= 1
    end = offset
    while end < len(text) and _WORD_CHAR.match(text[end]):
        end += 1
    return text[start:end]


def stem_command(argument: str, stemmer: WordProcessorInterface = None) -> str:
    if stemmer is None:
        stemmer = PorterStemmer()
    return " ".join(stemmer.process(iter(split_words(argument))))


def main(argv=None):
    args = _build_parser().parse_args(argv)
    if args.words:
        argument = " ".join(args.words)
    elif args.text is not None:
        argument = word_at(args.text, args.offset if args.offset is not None else len(args.text))
    else:
        argument = sys.stdin.read()

    with get_stemmer(args.method) as stemmer:
        result = stem_command(argument, stemmer)
    if result:
        print(result)
    return result


def _build_parser():
    parser = argparse.ArgumentParser(description='Stem space-separated words')
    parser.add_argument('words', nargs='*', help='words to be stemmed')
    parser.add_argument('--text', dest='text', type=str, help='text to take the word under cursor from')
    parser.add_argument('--offset', dest='offset', type=int, help='cursor position in --text')
    parser.add_argument('--method', dest='method', type=str, default='porter', choices=stemmer_names(),
                        help='stemmer to be used')
    return parser


if __name__ == "__main__":
    main()
