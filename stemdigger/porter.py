"""
Porter stemming algorithm (M.F. Porter, "An algorithm for suffix stripping", 1980).

A word is rewritten by eight ordered steps, every step feeds its output to the next one.
Steps 1a, 1b, 2, 3 and 4 are driven by suffix rule tables; 1c, 5a and 5b are single rules.
"""
from typing import Callable, Iterator, Tuple

from stemdigger.letters import m_gt, m_eq, contains_vowel, ends_double_consonant, cvc_exception, measure_greater
from stemdigger.rules.suffix_rules import SuffixTransformation, SuffixRuleTable
from stemdigger.stemmer import StemmerInterface

_STEP = Callable[[str], str]

MIN_STEMMED_LENGTH = 3

############################ Rule tables ############################

_STEP_1A = SuffixRuleTable.from_pairs([
    ('sses', 'ss'),
    ('ies', 'i'),
    ('ss', 'ss'),
    ('s', ''),
])

_STEP_1B = SuffixRuleTable([
    SuffixTransformation('eed', 'ee', measure_greater(0)),
    SuffixTransformation('ed', '', contains_vowel),
    SuffixTransformation('ing', '', contains_vowel),
])

_STEP_2 = SuffixRuleTable.from_pairs([
    ('ational', 'ate'),
    ('tional', 'tion'),
    ('enci', 'ence'),
    ('anci', 'ance'),
    ('izer', 'ize'),
    ('bli', 'ble'),
    ('alli', 'al'),
    ('entli', 'ent'),
    ('eli', 'e'),
    ('ousli', 'ous'),
    ('ization', 'ize'),
    ('ation', 'ate'),
    ('ator', 'ate'),
    ('alism', 'al'),
    ('iveness', 'ive'),
    ('fulness', 'ful'),
    ('ousness', 'ous'),
    ('aliti', 'al'),
    ('iviti', 'ive'),
    ('biliti', 'ble'),
    ('logi', 'log'),
], measure_greater(0))

_STEP_3 = SuffixRuleTable.from_pairs([
    ('icate', 'ic'),
    ('ative', ''),
    ('alize', 'al'),
    ('iciti', 'ic'),
    ('ical', 'ic'),
    ('ful', ''),
    ('ness', ''),
], measure_greater(0))


def _ion_guard(stem: str) -> bool:
    # ion goes only after s or t, which stay in the stem
    return stem.endswith(('s', 't')) and m_gt(stem, 1)


_STEP_4_SUFFIXES = ('al', 'ance', 'ence', 'er', 'ic', 'able', 'ible', 'ant', 'ement', 'ment', 'ent',
                    'ou', 'ism', 'ate', 'iti', 'ous', 'ive', 'ize')

_STEP_4 = SuffixRuleTable([SuffixTransformation(suffix, '', measure_greater(1)) for suffix in _STEP_4_SUFFIXES] +
                          [SuffixTransformation('ion', '', _ion_guard)])

############################### Steps ###############################


def step1a(word: str) -> str:
    return _STEP_1A.apply(word)


def step1b(word: str) -> str:
    rule = _STEP_1B.find(word)
    if rule is None or not rule.accepts(word):
        return word
    result = rule.transform(word)
    if rule.word_suffix == 'eed':
        return result
    return _restore_stem_end(result)


def _restore_stem_end(stem: str) -> str:
    """
    Tidy up a stem after -ed or -ing removal:
    conflat(ed) -> conflate, hopp(ing) -> hop, fil(ing) -> file
    """
    if stem.endswith(('at', 'bl', 'iz')):
        return stem + 'e'
    if ends_double_consonant(stem) and stem[-1] not in 'lsz':
        return stem[:-1]
    if m_eq(stem, 1) and cvc_exception(stem):
        return stem + 'e'
    return stem


def step1c(word: str) -> str:
    if word.endswith('y') and contains_vowel(word[:-1]):
        return word[:-1] + 'i'
    return word


def step2(word: str) -> str:
    return _STEP_2.apply(word)


def step3(word: str) -> str:
    return _STEP_3.apply(word)


def step4(word: str) -> str:
    return _STEP_4.apply(word)


def step5a(word: str) -> str:
    if not word.endswith('e'):
        return word
    stem = word[:-1]
    if m_gt(stem, 1) or (m_eq(stem, 1) and not cvc_exception(stem)):
        return stem
    return word


def step5b(word: str) -> str:
    if word.endswith('ll') and m_gt(word, 1):
        return word[:-1]
    return word


STEPS: Tuple[Tuple[str, _STEP], ...] = (
    ('1a', step1a),
    ('1b', step1b),
    ('1c', step1c),
    ('2', step2),
    ('3', step3),
    ('4', step4),
    ('5a', step5a),
    ('5b', step5b),
)

STEP_NAMES = tuple(name for name, _ in STEPS)


def stem_steps(word: str, last_step: str = '5b') -> str:
    """
    Run the pipeline up to and including ``last_step``
    :param word: lowercase word
    :param last_step: one of STEP_NAMES
    :return: word after the last requested step

    The worked examples of the 1980 paper are single-step results: agreed -> agree (1b),
    relational -> relate and rational -> rational (2). Later steps go on rewriting them
    (agre, relat, ration), so ``stem`` gives the full-pipeline stems and this function
    reproduces the paper examples when stopped after their step.
    """
    if last_step not in STEP_NAMES:
        raise ValueError("Unknown step: {}".format(last_step))
    if len(word) < MIN_STEMMED_LENGTH:
        return word
    for name, step in STEPS:
        word = step(word)
        if name == last_step:
            break
    return word


def stem(word: str) -> str:
    return stem_steps(word)


############################# Processors #############################


class PorterStemmer(StemmerInterface):

    def stem(self, words: Iterator[str]) -> Iterator[str]:
        return map(stem, words)

    def __str__(self):
        return "porter"


class MarkedInitialYStemmer(StemmerInterface):
    """
    Porter stemmer that hides a word-initial y behind a Y marker so that it never counts as a vowel.

    Only words starting with lowercase y are marked, and only those get the marker replaced back,
    a capital Y typed by the caller is left as it is.
    """

    def stem(self, words: Iterator[str]) -> Iterator[str]:
        return map(stem_marked_initial_y, words)

    def __str__(self):
        return "porter_marked_y"


def stem_marked_initial_y(word: str) -> str:
    if not word.startswith('y'):
        return stem(word)
    result = stem('Y' + word[1:])
    # suffix rules never reach the first letter of a marked word
    return 'y' + result[1:]


def marked_initial_y_stemmer() -> MarkedInitialYStemmer:
    return MarkedInitialYStemmer()
