from typing import Iterable, Iterator, Tuple, List, Optional, Callable

import argparse
import json
import os
from collections import namedtuple
from stemdigger.processor import WordProcessorInterface
from stemdigger.evaluation.dataset import VocabularyDataSet
from stemdigger.evaluation.vocabulary_io import VocabularyWriter

from stemdigger.evaluation.stemmers import get_stemmer, stemmer_names

_PAIR = Tuple[str, str]

Mismatch = namedtuple('Mismatch', ['line', 'word', 'actual', 'expected'])

###################### report ######################


class EvaluationReport(object):
    def __init__(self, total: int, mismatches: Iterable[Mismatch]):
        self.__total = total
        self.__mismatches = list(mismatches)

    @property
    def total(self) -> int:
        return self.__total

    @property
    def mismatches(self) -> List[Mismatch]:
        return list(self.__mismatches)

    @property
    def mismatches_count(self) -> int:
        return len(self.__mismatches)

    @property
    def accuracy(self) -> float:
        if self.__total == 0:
            return 1.0
        return (self.__total - self.mismatches_count) / self.__total

    def __repr__(self):
        return "{{'total': {}, 'mismatches': {}}}".format(self.__total, self.mismatches_count)


###################### tester ######################

_writer = VocabularyWriter()


class StemmerTester(object):

    def __init__(self, results_path: str = None):
        self.__results_path = results_path

    def _gold_data(self) -> Iterator[_PAIR]:
        pass

    def test(self, stemmer: WordProcessorInterface, file_name: str = None) -> EvaluationReport:
        gold_data = list(self._gold_data())
        predicted = list(stemmer.process(iter([word for word, _ in gold_data])))
        if len(predicted) != len(gold_data):
            raise ValueError("{} returned {} stems for {} words".format(stemmer, len(predicted), len(gold_data)))
        if self.__results_path and file_name:
            self._save(file_name, predicted)

        mismatches = [Mismatch(line, word, actual, expected)
                      for line, ((word, expected), actual) in enumerate(zip(gold_data, predicted), 1)
                      if actual != expected]
        return EvaluationReport(len(gold_data), mismatches)

    def _save(self, file_name: str, stems: List[str]):
        path = os.path.join(self.__results_path, file_name)
        dir_name = os.path.dirname(path)
        os.makedirs(dir_name, exist_ok=True)
        _writer.write_to_file(path, stems)
        print("Stems have been written to '{}'".format(path))


class DataSetStemmerTester(StemmerTester):
    def __init__(self, gold_data: Iterable[_PAIR]):
        StemmerTester.__init__(self)
        self.__gold_data = gold_data

    def _gold_data(self) -> Iterator[_PAIR]:
        return iter(self.__gold_data)


class FileStemmerTester(StemmerTester):
    def __init__(self, words_file: str, expected_file: str, results_path: str = None):
        StemmerTester.__init__(self, results_path)
        self.__dataset = VocabularyDataSet(words_file, expected_file)

    def _gold_data(self) -> Iterator[_PAIR]:
        return iter(self.__dataset)


###################### printer ######################


def get_report_printer(max_printed: Optional[int] = None) -> Callable[[EvaluationReport], None]:
    assert max_printed is None or max_printed >= 0

    def print_report(report: EvaluationReport):
        mismatches = report.mismatches
        if max_printed is not None:
            mismatches = mismatches[:max_printed]
        for mismatch in mismatches:
            print("{:>6}  {}: {} != {}".format(mismatch.line, mismatch.word, mismatch.actual, mismatch.expected))
        if len(mismatches) < report.mismatches_count:
            print("... {} more".format(report.mismatches_count - len(mismatches)))
        print("Mismatches: {} of {} words ({:.2f}% correct)".format(
            report.mismatches_count, report.total, 100 * report.accuracy))

    return print_report


###################### main ######################


def main(args) -> EvaluationReport:
    stemmer = get_stemmer(args.method)
    tester = FileStemmerTester(args.words, args.expected, args.results_path)

    print("Evaluation for {}...".format(args.method))
    with stemmer:
        report = tester.test(stemmer, "{}-stems.txt".format(args.method))

    get_report_printer(args.max_printed)(report)
    return report


class _Arguments(object):
    def __init__(self, words, expected, method, results_path=None, max_printed=None):
        self.words = words
        self.expected = expected
        self.method = method
        self.results_path = results_path
        self.max_printed = max_printed


def _build_parser():
    parser = argparse.ArgumentParser(description='Stemmer vocabulary checker')
    parser.add_argument('--settings', dest='settings', type=str,
                        help='path to json configuration file')
    parser.add_argument('--words', dest='words', type=str, help='word list, one word per line')
    parser.add_argument('--expected', dest='expected', type=str, help='expected stems, line-aligned with words')
    parser.add_argument('--method', dest='method', type=str, default='porter', choices=stemmer_names(),
                        help='stemmer to be tested')
    parser.add_argument('--results_path', dest='results_path', type=str,
                        help='directory for actual stems')
    parser.add_argument('--max_printed', dest='max_printed', type=int,
                        help='maximal number of printed mismatches')
    return parser


def _parse_arguments(parser, argv=None):
    args = parser.parse_args(argv)
    settings = {}
    if args.settings:
        with open(args.settings) as f:
            settings = json.load(f)
    vocabulary = settings.get("vocabulary", {})
    words = args.words or vocabulary.get("words")
    expected = args.expected or vocabulary.get("expected")
    if words is None or expected is None:
        parser.error("word list and expected stems are required (--words/--expected or settings)")
    results_path = args.results_path or settings.get("results_path")
    max_printed = args.max_printed if args.max_printed is not None else settings.get("max_printed")
    return _Arguments(words, expected, args.method, results_path, max_printed)


if __name__ == "__main__":
    args = _parse_arguments(_build_parser())
    main(args)
