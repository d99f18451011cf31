import numpy as np
import pandas as pd
import warnings

from sklearn.base import BaseEstimator, TransformerMixin
from sklearn.preprocessing import KBinsDiscretizer
from sklearn.utils.validation import check_is_fitted


def _sorted_categories(column):
    """Unique values of a string column, in numeric order when every value is a number"""
    categories = np.unique(column)
    numeric = pd.to_numeric(pd.Series(categories), errors="coerce")
    if numeric.notna().all():
        categories = categories[np.argsort(numeric.to_numpy(), kind="stable")]
    return categories


class CustomOrdinalFeatureEncoder(TransformerMixin, BaseEstimator):
    """Ordinal encoder with binning of continuous features.

    Float columns of a DataFrame are discretized with a KBinsDiscretizer
    and every column is then encoded to integers following the sorted
    order of its values (numeric order for numbers and bin codes,
    alphabetical otherwise). Values not seen at fitting time are
    encoded as the number of categories of that column.

    Parameters
    ----------
    n_bins : int, default=5
        Number of bins used for float columns.

    strategy : str {quantile,uniform,kmeans}, default="quantile"
        Strategy used by the discretizer to place the bin edges.

    Attributes
    ----------
    n_features_ : int
        Number of features seen at fitting time.

    feature_names_ : list or None
        Column names when fitted with a DataFrame.

    numerical_feature_index_ : list
        Indexes of the columns that were discretized.

    discretizer_ : KBinsDiscretizer or None
        Fitted discretizer for the float columns.

    categories_ : list of arrays
        Sorted categories of each column (bin codes as strings for
        discretized columns).

    unknown_values_ : list of int
        Code given to unseen values for each column.
    """

    def __init__(self, n_bins=5, strategy="quantile"):
        self.n_bins = n_bins
        self.strategy = strategy

    def _discretize(self, X, fit=False):
        X = X.copy()
        columns = X.columns[self.numerical_feature_index_]
        numerical_features = X[columns].astype(float)
        with warnings.catch_warnings():
            # Bins collapsing on repeated values are expected
            warnings.simplefilter("ignore", category=UserWarning)
            warnings.simplefilter("ignore", category=FutureWarning)
            if fit:
                self.discretizer_ = KBinsDiscretizer(n_bins=self.n_bins,
                                                     encode="ordinal",
                                                     strategy=self.strategy)
                discretized = self.discretizer_.fit_transform(numerical_features)
            else:
                discretized = self.discretizer_.transform(numerical_features)
        for i, column in enumerate(columns):
            X[column] = discretized[:, i].astype(int)
        return X

    def _to_strings(self, X, fit=False):
        if fit:
            self.feature_names_ = list(X.columns) if isinstance(X, pd.DataFrame) else None
            self.numerical_feature_index_ = []
            self.discretizer_ = None
            if isinstance(X, pd.DataFrame):
                numerical_features = X.select_dtypes("float").columns
                self.numerical_feature_index_ = list(X.columns.get_indexer(numerical_features))
        if self.numerical_feature_index_:
            if not isinstance(X, pd.DataFrame):
                X = pd.DataFrame(X, columns=self.feature_names_)
            X = self._discretize(X, fit=fit)
        if isinstance(X, pd.DataFrame):
            X = X.to_numpy()
        X = np.asarray(X)
        if X.ndim == 1:
            X = X.reshape(-1, 1)
        return X.astype(str)

    def fit(self, X, y=None):
        X = self._to_strings(X, fit=True)
        self.n_features_ = X.shape[1]
        self.categories_ = [_sorted_categories(X[:, j]) for j in range(self.n_features_)]
        self.unknown_values_ = [cat.shape[0] for cat in self.categories_]
        return self

    def transform(self, X, y=None):
        check_is_fitted(self)
        n_columns = X.shape[1] if len(X.shape) > 1 else 1
        if self.n_features_ != n_columns:
            raise ValueError(f"Expected {self.n_features_} features, got {n_columns} instead")
        X = self._to_strings(X)

        X_encoded = np.empty(shape=X.shape, dtype=int)
        for j in range(X.shape[1]):
            idx = pd.Index(self.categories_[j]).get_indexer(X[:, j])
            X_encoded[:, j] = np.where(idx >= 0, idx, self.unknown_values_[j])
        return X_encoded

    def fit_transform(self, X, y=None):
        return self.fit(X, y).transform(X, y)

    def inverse_transform(self, X, y=None):
        '''Inverse transform (discretized features return their bin code)'''
        check_is_fitted(self)
        X = np.asarray(X)
        if self.n_features_ != X.shape[1]:
            raise ValueError(f"Expected {self.n_features_} features, got {X.shape[1]} instead")
        X_restored = np.empty(X.shape, dtype=object)
        for j in range(X.shape[1]):
            idx = X[:, j].copy()
            mask = idx >= self.categories_[j].shape[0]
            idx[mask] = 0
            X_restored[:, j] = np.where(mask, None, self.categories_[j][idx])
        return X_restored

    def get_feature_names(self):
        check_is_fitted(self)
        if self.feature_names_ is None:
            return [f"x{j}" for j in range(self.n_features_)]
        return list(self.feature_names_)

    def bin_interval(self, feature_index, code):
        """Returns the (lower, upper) edges of one bin of a discretized feature"""
        check_is_fitted(self)
        if feature_index not in self.numerical_feature_index_:
            raise ValueError(f"Feature {feature_index} was not discretized")
        i = self.numerical_feature_index_.index(feature_index)
        edges = self.discretizer_.bin_edges_[i]
        code = int(code)
        if not 0 <= code < len(edges) - 1:
            raise ValueError(f"Bin code not valid, expected a value between 0 and {len(edges) - 2}")
        lower = -np.inf if code == 0 else edges[code]
        upper = np.inf if code == len(edges) - 2 else edges[code + 1]
        return lower, upper
