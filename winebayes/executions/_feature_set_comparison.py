import numpy as np
import pandas as pd

from tqdm.autonotebook import tqdm

from winebayes.data import get_X_y
from winebayes.model_selection import cv_results_frame, evaluate_classifier, split_train_test, tune_naive_bayes
from winebayes.text import WordPresenceTransformer
from winebayes.utils import get_cv_scorer, get_scorer


COLUMN_NAMES = ["feature_set",
                "n_features",
                "best_params",
                "cv_score",
                "cv_std",
                "test_accuracy",
                "test_kappa",
                "test_score"]


def _fit_and_evaluate(name, X_train, y_train, X_test, y_test, param_grid, n_splits, n_repeats, scoring, seed,
                      verbose):
    search = tune_naive_bayes(X_train, y_train,
                              param_grid=param_grid,
                              n_splits=n_splits,
                              n_repeats=n_repeats,
                              scoring=get_cv_scorer(scoring),
                              seed=seed,
                              verbose=max(verbose - 1, 0))
    evaluation = evaluate_classifier(search.best_estimator_, X_test, y_test)
    evaluation["cv_results"] = cv_results_frame(search)
    prediction = np.asarray(search.best_estimator_.predict(X_test)).astype(str)
    score = get_scorer(scoring)(np.asarray(y_test).astype(str), prediction)
    row = [name,
           X_train.shape[1],
           str(search.best_params_),
           search.best_score_,
           search.cv_results_["std_test_score"][search.best_index_],
           evaluation["accuracy"],
           evaluation["kappa"],
           score]
    return row, evaluation


def feature_set_comparison(wine, target, feature_sets, param_grid=None, test_size=0.2, n_splits=5,
                           n_repeats=1, scoring="accuracy", seed=None, verbose=1):
    """Tunes and tests a NaiveBayes classifier for each feature set.

    Every feature set shares the same stratified train/test split. The
    hyperparameters are chosen by cross validation on the training split and
    the refitted classifier is scored once on the test split.

    Parameters
    ----------
    wine : DataFrame
        Prepared wine reviews.

    target : str
        Class column.

    feature_sets : dict
        Maps a feature set name to its list of columns.

    scoring : str, default="accuracy"
        get_scorer name used both to pick the hyperparameters (cv_score)
        and to score the test split (test_score).

    Returns
    -------
    results : DataFrame
        One row per feature set.

    evaluations : dict
        Feature set name -> evaluate_classifier output on the test split,
        plus the cross validation table under "cv_results".
    """
    train, test = split_train_test(wine, target, test_size=test_size, seed=seed)
    data = []
    evaluations = {}
    feature_sets_iter = tqdm(feature_sets.items(), bar_format='{l_bar}{bar:20}{r_bar}{bar:-10b}', disable=not verbose)
    for name, features in feature_sets_iter:
        if verbose:
            feature_sets_iter.set_postfix({"Feature set": name, "n_features": len(features)})
            feature_sets_iter.refresh()
        X_train, y_train = get_X_y(train, target, features)
        X_test, y_test = get_X_y(test, target, features)
        row, evaluations[name] = _fit_and_evaluate(name, X_train, y_train, X_test, y_test,
                                                   param_grid, n_splits, n_repeats, scoring, seed, verbose)
        data.append(row)
    return pd.DataFrame(data, columns=COLUMN_NAMES), evaluations


def word_feature_comparison(wine, target, base_features, n_words=(10, 25, 50), text_column="description",
                            stop_words=("wine",), param_grid=None, test_size=0.2, n_splits=5, n_repeats=1,
                            scoring="accuracy", seed=None, verbose=1):
    """Compares the base features against base features plus word presence features.

    The words are the most frequent (non stop) words of the training split
    reviews, so the test split does not leak into the vocabulary.

    Returns
    -------
    results : DataFrame
        One row for the base feature set and one per value of n_words.

    evaluations : dict
        Feature set name -> evaluate_classifier output on the test split.

    vocabularies : dict
        Feature set name -> selected words.
    """
    train, test = split_train_test(wine, target, test_size=test_size, seed=seed)
    X_train, y_train = get_X_y(train, target, base_features)
    X_test, y_test = get_X_y(test, target, base_features)

    data = []
    evaluations = {}
    vocabularies = {}
    row, evaluations["base"] = _fit_and_evaluate("base", X_train, y_train, X_test, y_test,
                                                 param_grid, n_splits, n_repeats, scoring, seed, verbose)
    data.append(row)
    vocabularies["base"] = []

    n_words_iter = tqdm(n_words, bar_format='{l_bar}{bar:20}{r_bar}{bar:-10b}', disable=not verbose)
    for n in n_words_iter:
        name = f"base + {n} words"
        if verbose:
            n_words_iter.set_postfix({"Feature set": name})
            n_words_iter.refresh()
        words = WordPresenceTransformer(text_column=text_column, n_words=n, stop_words=list(stop_words))
        words.fit(train)
        X_train_words = pd.concat([X_train, words.transform(train)], axis=1)
        X_test_words = pd.concat([X_test, words.transform(test)], axis=1)
        row, evaluations[name] = _fit_and_evaluate(name, X_train_words, y_train, X_test_words, y_test,
                                                   param_grid, n_splits, n_repeats, scoring, seed, verbose)
        data.append(row)
        vocabularies[name] = words.vocabulary_
    return pd.DataFrame(data, columns=COLUMN_NAMES), evaluations, vocabularies
