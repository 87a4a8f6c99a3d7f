from typing import Callable, List
from enum import Enum

_VOWELS = frozenset('aeiou')


class CharClass(Enum):
    VOWEL = 'V'
    CONSONANT = 'C'


######################## Classification ########################


def classify(word: str, index: int) -> CharClass:
    """
    Class of the letter at ``index``.

    ``y`` is a vowel only after a consonant, so a leading ``y`` is a consonant.
    Anything outside ``a e i o u y`` (uppercase letters and punctuation included) is a consonant.
    """
    if index < 0:
        index += len(word)
    return _classes(word[:index + 1])[index]


def _classes(word: str) -> List[CharClass]:
    result = []
    for ch in word:
        if ch in _VOWELS:
            result.append(CharClass.VOWEL)
        elif ch == 'y' and result and result[-1] is CharClass.CONSONANT:
            result.append(CharClass.VOWEL)
        else:
            result.append(CharClass.CONSONANT)
    return result


def cv_pattern(word: str) -> str:
    return ''.join(cls.value for cls in _classes(word))


########################### Measure ###########################


def measure(stem: str) -> int:
    """
    Number of VC sequences in ``[C](VC){m}[V]`` form of the stem
    """
    m = 0
    previous = None
    for cls in _classes(stem):
        if previous is CharClass.VOWEL and cls is CharClass.CONSONANT:
            m += 1
        previous = cls
    return m


########################## Conditions ##########################


def m_gt(stem: str, k: int) -> bool:
    return measure(stem) > k


def m_eq(stem: str, k: int) -> bool:
    return measure(stem) == k


def contains_vowel(stem: str) -> bool:
    return CharClass.VOWEL in _classes(stem)


def ends_double_consonant(stem: str) -> bool:
    if len(stem) < 2 or stem[-1] != stem[-2]:
        return False
    return _classes(stem)[-1] is CharClass.CONSONANT


def cvc_exception(stem: str) -> bool:
    """
    *o condition: stem ends consonant-vowel-consonant and the last consonant is not w, x or y
    (used to restore e at the end of short words like hope, file, size)
    """
    if len(stem) < 3 or stem[-1] in 'wxy':
        return False
    return cv_pattern(stem)[-3:] == 'CVC'


def measure_greater(k: int) -> Callable[[str], bool]:
    return lambda stem: m_gt(stem, k)


def measure_equals(k: int) -> Callable[[str], bool]:
    return lambda stem: m_eq(stem, k)


def always(stem: str) -> bool:
    return True
