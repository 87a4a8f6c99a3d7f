from typing import Optional, Iterable, Callable, Tuple, List

from stemdigger.letters import always

_GUARD = Callable[[str], bool]

####################### Suffix Transformation ########################


class SuffixTransformation(object):

    def __init__(self, word_suffix: str, replacement: str, guard: _GUARD = always):
        self.__word_suffix = word_suffix
        self.__replacement = replacement
        self.__guard = guard

    @property
    def word_suffix(self) -> str:
        return self.__word_suffix

    @property
    def replacement(self) -> str:
        return self.__replacement

    @property
    def guard(self) -> _GUARD:
        return self.__guard

    def is_applicable(self, word: str) -> bool:
        return word.endswith(self.__word_suffix)

    def stem_of(self, word: str) -> str:
        if not self.is_applicable(word):
            raise ValueError("'{}' does not end with '{}'".format(word, self.__word_suffix))
        return word[:len(word) - len(self.__word_suffix)]

    def accepts(self, word: str) -> bool:
        return self.__guard(self.stem_of(word))

    def transform(self, word: str) -> str:
        return self.stem_of(word) + self.__replacement

    def __repr__(self):
        return "{{'word_suffix': {}, 'replacement': {}, 'guard': {}}}".format(
            repr(self.__word_suffix), repr(self.__replacement), getattr(self.__guard, '__name__', 'guard'))

    def __str__(self):
        return "~{} -> ~{}".format(self.__word_suffix, self.__replacement)

    def __eq__(self, other):
        if isinstance(other, SuffixTransformation):
            return self.__word_suffix == other.__word_suffix and \
                   self.__replacement == other.__replacement and \
                   self.__guard is other.__guard
        return NotImplemented


########################## Suffix Rule Trie ##########################


class SuffixRuleTrie(object):
    """
    Trie over reversed word suffixes.

    Every node keeps the rules whose suffix ends at it, so walking a word from its last letter
    visits the applicable rules from the shortest suffix to the longest one.
    """

    def __init__(self):
        self.__children = None
        self.__rules = None

    def _get_child(self, ch: str) -> Optional['SuffixRuleTrie']:
        if self.__children is not None:
            return self.__children.get(ch, None)
        return None

    def __get_or_add_child(self, ch: str) -> 'SuffixRuleTrie':
        if self.__children is None:
            self.__children = {}
        if ch not in self.__children:
            self.__children[ch] = SuffixRuleTrie()
        return self.__children[ch]

    def __add_rule(self, rule: SuffixTransformation):
        if self.__rules is None:
            self.__rules = []
        self.__rules.append(rule)

    def get_applicable_rules(self, word: str) -> List[SuffixTransformation]:
        result = []
        current = self
        for ch in reversed(word):
            _extend(result, current.__rules)
            child = current._get_child(ch)
            if child is None:
                return result
            current = child

        _extend(result, current.__rules)
        return result

    def longest_match(self, word: str) -> Optional[SuffixTransformation]:
        rules = self.get_applicable_rules(word)
        return rules[-1] if rules else None

    @classmethod
    def build(cls, rules: Iterable[SuffixTransformation]) -> 'SuffixRuleTrie':
        root = SuffixRuleTrie()

        def __put_rule(rule: SuffixTransformation):
            current = root
            for ch in reversed(rule.word_suffix):
                current = current.__get_or_add_child(ch)
            current.__add_rule(rule)

        for rule in rules:
            __put_rule(rule)

        return root


######################### Suffix Rule Table ##########################


class SuffixRuleTable(object):
    """
    One step of suffix rewriting.

    Only the rule with the longest matching suffix is tried: when its guard rejects the stem
    the word is left unchanged, shorter suffixes are not considered.
    """

    def __init__(self, rules: Iterable[SuffixTransformation]):
        self.__rules = tuple(rules)
        suffixes = [rule.word_suffix for rule in self.__rules]
        if len(set(suffixes)) != len(suffixes):
            raise ValueError("Duplicate suffixes in rule table: {}".format(suffixes))
        self.__trie = SuffixRuleTrie.build(self.__rules)

    @property
    def rules(self) -> Tuple[SuffixTransformation, ...]:
        return self.__rules

    def find(self, word: str) -> Optional[SuffixTransformation]:
        return self.__trie.longest_match(word)

    def apply(self, word: str) -> str:
        rule = self.find(word)
        if rule is None or not rule.accepts(word):
            return word
        return rule.transform(word)

    def __len__(self):
        return len(self.__rules)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]], guard: _GUARD = always) -> 'SuffixRuleTable':
        return SuffixRuleTable(SuffixTransformation(suffix, replacement, guard) for suffix, replacement in pairs)


def _extend(l: List, elements: Iterable):
    if elements is not None:
        l.extend(elements)
