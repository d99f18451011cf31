from ._tokenize import unnest_tokens
from ._tokenize import remove_stop_words
from ._tokenize import count_words
from ._tokenize import top_words
from ._tokenize import top_words_by_class
from ._tokenize import document_term_matrix
from ._tokenize import add_word_features
from ._tokenize import WordPresenceTransformer

__all__ = [
    "unnest_tokens",
    "remove_stop_words",
    "count_words",
    "top_words",
    "top_words_by_class",
    "document_term_matrix",
    "add_word_features",
    "WordPresenceTransformer",
]
