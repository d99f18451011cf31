import numpy as np
import pandas as pd

from sklearn.metrics import classification_report, cohen_kappa_score, confusion_matrix
from sklearn.model_selection import GridSearchCV, RepeatedStratifiedKFold, train_test_split

from winebayes.naive_bayes import NaiveBayes


NAIVE_BAYES_GRID = {
    "alpha": [0.5, 1.0, 2.0],
    "n_bins": [3, 5, 8],
    "strategy": ["quantile", "uniform"],
}


def split_train_test(df, target, test_size=0.2, seed=None, stratify=True):
    '''Train/test split of a table, stratified on the target by default'''
    if target not in df.columns:
        raise ValueError(f"Unknown target {target}, expected one of {tuple(df.columns)}")
    train, test = train_test_split(df,
                                   test_size=test_size,
                                   random_state=seed,
                                   shuffle=True,
                                   stratify=df[target] if stratify else None)
    return train.reset_index(drop=True), test.reset_index(drop=True)


def tune_naive_bayes(X, y, param_grid=None, n_splits=5, n_repeats=1, scoring="accuracy", seed=None, verbose=0):
    """Grid search of the NaiveBayes hyperparameters with repeated stratified k-fold.

    Parameters
    ----------
    X : DataFrame or array-like of shape (n_samples, n_features)
        Raw features, float columns are binned.

    y : array-like of shape (n_samples,)
        Class labels.

    param_grid : dict or list of dicts, default=None
        Hyperparameter grid, NAIVE_BAYES_GRID when None.

    n_splits, n_repeats : int
        Cross validation folds and repetitions.

    scoring : str or callable
        Any scikit-learn scoring name or scorer (see utils.get_cv_scorer).

    Returns
    -------
    search : GridSearchCV
        Search refitted on the full data with the best parameters.
    """
    if param_grid is None:
        param_grid = NAIVE_BAYES_GRID
    cv = RepeatedStratifiedKFold(n_splits=n_splits, n_repeats=n_repeats, random_state=seed)
    search = GridSearchCV(NaiveBayes(),
                          param_grid=param_grid,
                          scoring=scoring,
                          cv=cv,
                          refit=True,
                          error_score="raise",
                          verbose=verbose)
    search.fit(X, y)
    if verbose:
        print(f"Best params: {search.best_params_} -> {scoring}={search.best_score_:.4f}")
    return search


def cv_results_frame(search):
    '''Mean and std test score per parameter combination, best first'''
    results = pd.DataFrame(search.cv_results_)
    params = pd.DataFrame(list(results["params"]))
    scores = results[["mean_test_score", "std_test_score", "rank_test_score"]]
    return (pd.concat([params, scores], axis=1)
              .sort_values("rank_test_score", kind="stable")
              .reset_index(drop=True))


def class_statistics(matrix):
    '''Per class sensitivity, specificity, precision and support of a confusion matrix

    The matrix has the actual classes in the rows and the predicted ones in the columns.'''
    cm = matrix.to_numpy().astype(float)
    total = cm.sum()
    tp = np.diag(cm)
    support = cm.sum(axis=1)
    predicted = cm.sum(axis=0)
    fp = predicted - tp
    fn = support - tp
    tn = total - tp - fp - fn
    with np.errstate(divide="ignore", invalid="ignore"):
        statistics = pd.DataFrame({
            "sensitivity": np.where(support > 0, tp / support, np.nan),
            "specificity": np.where(tn + fp > 0, tn / (tn + fp), np.nan),
            "precision": np.where(predicted > 0, tp / predicted, np.nan),
            "support": support.astype(int),
        }, index=matrix.index)
    return statistics


def evaluate_classifier(clf, X, y):
    """Scores a fitted classifier on held out data.

    Returns
    -------
    evaluation : dict
        accuracy, kappa, confusion_matrix (DataFrame, actual x predicted),
        class_statistics (DataFrame) and report (str).
    """
    y = np.asarray(y)
    prediction = np.asarray(clf.predict(X))
    labels = np.unique(np.concatenate([y, prediction]).astype(str))
    y = y.astype(str)
    prediction = prediction.astype(str)
    matrix = pd.DataFrame(confusion_matrix(y, prediction, labels=labels),
                          index=pd.Index(labels, name="actual"),
                          columns=pd.Index(labels, name="predicted"))
    return {
        "accuracy": float(np.mean(y == prediction)),
        "kappa": float(cohen_kappa_score(y, prediction, labels=labels)),
        "confusion_matrix": matrix,
        "class_statistics": class_statistics(matrix),
        "report": classification_report(y, prediction, labels=labels, zero_division=0),
    }
