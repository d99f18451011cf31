import numpy as np
import pandas as pd

from sklearn.base import BaseEstimator, TransformerMixin
from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS
from sklearn.utils.validation import check_is_fitted


TOKEN_PATTERN = r"[a-z0-9]+(?:'[a-z0-9]+)*"


def unnest_tokens(df, text_column="description", id_column="id", token_column="word"):
    '''One row per (document, token), lower cased and without punctuation.

    Token order inside each document is preserved; documents with empty or
    missing text produce no rows.'''
    for column in (text_column, id_column):
        if column not in df.columns:
            raise ValueError(f"Unknown column {column}, expected one of {tuple(df.columns)}")
    text = df[text_column].fillna("").astype(str).str.lower()
    tokens = (df[[id_column]]
                .assign(**{token_column: text.str.findall(TOKEN_PATTERN)})
                .explode(token_column)
                .dropna(subset=[token_column]))
    return tokens.reset_index(drop=True)


def remove_stop_words(tokens, extra=None, token_column="word"):
    '''Anti join of the tokens with the English stop words and any extra words'''
    stop_words = set(ENGLISH_STOP_WORDS)
    if extra is not None:
        stop_words |= {word.lower() for word in extra}
    return tokens[~tokens[token_column].isin(stop_words)].reset_index(drop=True)


def count_words(tokens, by=None, token_column="word"):
    '''Token counts sorted in descending order (within each group if by is given)'''
    keys = ([by] if isinstance(by, str) else list(by or [])) + [token_column]
    counts = tokens.groupby(keys).size().rename("n").reset_index()
    sort_keys = keys[:-1] + ["n", token_column]
    ascending = [True] * (len(keys) - 1) + [False, True]
    return counts.sort_values(sort_keys, ascending=ascending).reset_index(drop=True)


def top_words(tokens, n=10, token_column="word"):
    return count_words(tokens, token_column=token_column).head(n)


def top_words_by_class(tokens, labels, target, n=10, id_column="id", token_column="word"):
    '''Most frequent words per class with the share of the class tokens they represent.

    labels is a table holding the id and target columns of every document.'''
    labelled = tokens.merge(labels[[id_column, target]], on=id_column, how="inner")
    counts = count_words(labelled, by=target, token_column=token_column)
    counts["proportion"] = counts["n"] / counts.groupby(target)["n"].transform("sum")
    return counts.groupby(target, sort=True).head(n).reset_index(drop=True)


def document_term_matrix(tokens, documents=None, vocabulary=None, binary=False,
                         id_column="id", token_column="word"):
    """Pivots long token counts into a wide documents x words matrix.

    Parameters
    ----------
    tokens : DataFrame
        Output of unnest_tokens (optionally filtered).

    documents : array-like, default=None
        Ids of every document; documents without tokens get a row of zeros.

    vocabulary : array-like, default=None
        Words to keep as columns, in this order. Words that never occur get a
        column of zeros.

    binary : bool, default=False
        Word presence (0/1) instead of counts.

    Returns
    -------
    matrix : DataFrame
        Index are the document ids, columns the words.
    """
    if vocabulary is not None:
        tokens = tokens[tokens[token_column].isin(vocabulary)]
    counts = tokens.groupby([id_column, token_column]).size().rename("n").reset_index()
    matrix = counts.pivot_table(index=id_column,
                                columns=token_column,
                                values="n",
                                aggfunc="sum",
                                fill_value=0)
    matrix.columns.name = None
    if vocabulary is not None:
        matrix = matrix.reindex(columns=list(vocabulary), fill_value=0)
    if documents is not None:
        matrix = matrix.reindex(index=pd.Index(documents, name=id_column), fill_value=0)
    matrix = matrix.astype(int)
    if binary:
        matrix = (matrix > 0).astype(int)
    return matrix


def add_word_features(df, words, text_column="description", id_column="id", prefix="word_"):
    '''Appends one presence column per word to the table'''
    if id_column not in df.columns:
        df = df.assign(**{id_column: np.arange(df.shape[0])})
    tokens = unnest_tokens(df, text_column=text_column, id_column=id_column)
    presence = document_term_matrix(tokens,
                                    documents=df[id_column].to_numpy(),
                                    vocabulary=words,
                                    binary=True,
                                    id_column=id_column)
    presence.columns = [prefix + word for word in presence.columns]
    presence = presence.reset_index(drop=True)
    presence.index = df.index
    return pd.concat([df, presence], axis=1)


class WordPresenceTransformer(TransformerMixin, BaseEstimator):
    """Bag of words presence features from the most frequent words.

    Parameters
    ----------
    text_column : str, default="description"
        Column holding the free text.

    n_words : int, default=20
        Number of words kept as features.

    stop_words : array-like, default=None
        Extra stop words removed on top of the English list.

    prefix : str, default="word_"
        Prefix of the output columns.

    Attributes
    ----------
    vocabulary_ : list
        Words selected at fitting time, most frequent first.
    """

    def __init__(self, text_column="description", n_words=20, stop_words=None, prefix="word_"):
        self.text_column = text_column
        self.n_words = n_words
        self.stop_words = stop_words
        self.prefix = prefix

    def _tokens(self, X):
        documents = pd.DataFrame({"id": np.arange(X.shape[0]),
                                  self.text_column: X[self.text_column].to_numpy()})
        tokens = unnest_tokens(documents, text_column=self.text_column)
        return remove_stop_words(tokens, extra=self.stop_words)

    def fit(self, X, y=None):
        if self.n_words < 1:
            raise ValueError(f"n_words must be positive, got {self.n_words}")
        self.vocabulary_ = top_words(self._tokens(X), n=self.n_words)["word"].tolist()
        return self

    def transform(self, X, y=None):
        check_is_fitted(self)
        matrix = document_term_matrix(self._tokens(X),
                                      documents=np.arange(X.shape[0]),
                                      vocabulary=self.vocabulary_,
                                      binary=True)
        matrix.columns = [self.prefix + word for word in matrix.columns]
        matrix.index = X.index
        return matrix

    def get_feature_names_out(self, input_features=None):
        check_is_fitted(self)
        return np.array([self.prefix + word for word in self.vocabulary_], dtype=object)
