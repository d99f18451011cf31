import numpy as np
import pandas as pd
from sklearn.base import BaseEstimator, TransformerMixin
from sklearn.utils.validation import check_is_fitted


class CustomLabelEncoder(TransformerMixin, BaseEstimator):
    """Label encoder

    Label encoder using numpy's searchsorted method to encode labels to an integer ordinal representation.
    Unseen labels are transformed to n, where n is the number of known classes.

    Attributes
    ----------
    classes_ : array-like
        Classes sorted in alphanumeric order
    """

    def fit(self, y):
        self.classes_ = np.sort(pd.unique(np.asarray(y)))
        return self

    def transform(self, y):
        check_is_fitted(self)
        y = np.asarray(y)
        classes = self.classes_
        idx = np.searchsorted(classes, y)
        idx[idx == classes.shape[0]] = 0
        mask = classes[idx] == y
        y_transformed = np.full(fill_value=classes.shape[0], shape=y.shape)
        y_transformed[mask] = idx[mask]
        return y_transformed

    def inverse_transform(self, y):
        check_is_fitted(self)
        y = np.asarray(y)
        unknown = y >= self.classes_.shape[0]
        restored = self.classes_[np.where(unknown, 0, y)].astype(object)
        restored[unknown] = None
        return restored

    def fit_transform(self, y):
        self.classes_, y_transformed = np.unique(np.asarray(y), return_inverse=True)
        return y_transformed
