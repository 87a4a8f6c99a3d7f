from typing import List

import stemdigger.porter as porter
import stemdigger.stemmer as stemmer
from stemdigger.processor import WordProcessorInterface

__stemmer_factories = {
    'stub': stemmer.StubStemmer,
    'porter': porter.PorterStemmer,
    'porter_marked_y': porter.marked_initial_y_stemmer
}


def get_stemmer(name: str) -> WordProcessorInterface:
    if name not in __stemmer_factories:
        raise NotImplementedError("Unknown method")
    return __stemmer_factories[name]()


def stemmer_names() -> List[str]:
    return list(__stemmer_factories.keys())
