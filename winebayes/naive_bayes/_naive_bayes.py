import numpy as np
import pandas as pd

from numba import njit
from scipy.special import logsumexp
from sklearn.base import BaseEstimator, ClassifierMixin
from sklearn.utils import check_X_y
from sklearn.utils.validation import check_is_fitted

#Local Imports
from winebayes.encoder import CustomLabelEncoder, CustomOrdinalFeatureEncoder

"""
Counting and prediction kernels compiled with Numba nopython mode
"""
@njit
def _get_counts(column, y, n_values, n_classes):
    """Computes count for each value of a feature for each class value"""
    counts = np.zeros((n_values, n_classes))
    for i in range(column.shape[0]):
        counts[column[i], y[i]] += 1
    return counts


@njit
def _predict_single(log_probability, column, n_values, log_probabilities, log_alpha):
    """Adds the contribution of one feature to the log joint probability"""
    for i in range(column.shape[0]):
        value = column[i]
        if value < n_values:
            log_probability[i, :] += log_probabilities[value]
        else:
            # Unknown values that are not in the table => log(0+alpha)
            log_probability[i, :] += log_alpha
    return log_probability


def _get_tables(X, y, n_classes, alpha):
    """Computes count and smoothed log count for each value of each feature"""
    feature_counts = []
    smoothed_log_counts = []
    for j in range(X.shape[1]):
        feature = np.ascontiguousarray(X[:, j])
        counts = _get_counts(feature, y, int(np.max(feature)) + 1, n_classes)
        feature_counts.append(counts)
        with np.errstate(divide="ignore"):
            smoothed_log_counts.append(np.log(counts + alpha))
    return feature_counts, smoothed_log_counts


def compute_total_probability(class_values_count, feature_unique_values_count, alpha):
    """Log of the smoothed denominators summed over every feature"""
    total = class_values_count + alpha * feature_unique_values_count.reshape(-1, 1)
    with np.errstate(divide="ignore"):
        return np.sum(np.log(total), axis=0)


class NaiveBayes(ClassifierMixin, BaseEstimator):
    """A categorical Naive Bayes classifier.

    Simple Naive Bayes classifier accepting non-encoded input, enhanced with numba, using MAP
    to predict the most likely class. Float columns of a DataFrame are binned before being
    treated as categorical features.

    Parameters
    ----------
    alpha : float, default=1.0
        Additive (Laplace/Lidstone) smoothing parameter
        (0 for no smoothing).

    encode_data : bool, default=True
        Encode data with a CustomOrdinalFeatureEncoder. When set to False the
        classifier expects ordinal encoded features and labels.

    n_bins : int, default=5
        Number of bins for continuous (float) features.

    strategy : str {quantile,uniform,kmeans}, default="quantile"
        Binning strategy for continuous features.

    Attributes
    ----------
    feature_encoder_ : CustomOrdinalFeatureEncoder or None
        Encodes data in ordinal way with unseen values handling if encode_data is set to True.

    class_encoder_ : CustomLabelEncoder or None
        Encodes the class in ordinal way if encode_data is set to True.

    classes_ : array-like of shape (n_classes_,)
        Class labels known to the classifier.

    row_count_ : int
        Number of samples

    column_count_ : int
        Number of features

    n_classes_ : int
        Number of classes

    class_values_count_ : array-like of shape (n_classes_,)
        Array where `class_values_count_[i]` contains the count of the ith class value.

    class_log_count_ : array-like of shape (n_classes_,)
        Log of `class_values_count_`.

    feature_counts_ : list of arrays of shape (n_values, n_classes_)
        `feature_counts_[j][v, c]` is the number of samples of class c with value v for the jth feature.

    smoothed_log_counts_ : list of arrays of shape (n_values, n_classes_)
        Log of `feature_counts_` plus alpha.

    feature_values_count_ : array-like of shape (column_count_,)
        Number of possible values (table rows) of each feature.

    feature_unique_values_count_ : array-like of shape (column_count_,)
        Number of values of each feature seen at fitting time. This is needed to compute the smoothing.

    total_probability_ : array-like of shape (n_classes_,)
        Sum over the features of log(class_values_count_ + alpha*feature_unique_values_count_)

    independent_term_ : array-like of shape (n_classes_,)
        Term independent of the sample, combining the prior and the smoothing denominators.
    """
    def __init__(self, alpha=1.0, encode_data=True, n_bins=5, strategy="quantile"):
        self.alpha = alpha
        self.encode_data = encode_data
        self.n_bins = n_bins
        self.strategy = strategy

    def _compute_independent_terms(self):
        """Computes the terms that are independent of the prediction"""
        self.total_probability_ = compute_total_probability(self.class_values_count_,
                                                            self.feature_unique_values_count_,
                                                            self.alpha)
        self.independent_term_ = self.class_log_count_ - self.total_probability_

    def _compute_probabilities(self, X, y):
        """Computes the conditional probabilities for each value of each feature"""
        self.feature_counts_, self.smoothed_log_counts_ = _get_tables(X, y, self.n_classes_, self.alpha)
        self.feature_values_count_ = np.array([counts.shape[0] for counts in self.feature_counts_])
        self.feature_unique_values_count_ = np.array([(counts.sum(axis=1) != 0).sum()
                                                      for counts in self.feature_counts_])

    def _encode_features(self, X):
        if self.encode_data:
            return self.feature_encoder_.transform(X)
        if isinstance(X, pd.DataFrame):
            X = X.to_numpy()
        return np.asarray(X, dtype=int)

    def fit(self, X, y):
        """ Fits the classifier with training data.

        Parameters
        ----------

        X : array-like of shape (n_samples, n_features)
            Training array that must be encoded unless
            encode_data is set to True

        y : array-like of shape (n_samples,)
            Label of the class associated to each sample.

        Returns
        -------
        self : object
        """
        if isinstance(y, (pd.Series, pd.DataFrame)):
            y = y.to_numpy().ravel()
        if self.encode_data:
            self.feature_encoder_ = CustomOrdinalFeatureEncoder(n_bins=self.n_bins, strategy=self.strategy)
            self.class_encoder_ = CustomLabelEncoder()
            X = self.feature_encoder_.fit_transform(X)
            y = self.class_encoder_.fit_transform(y)
            self.classes_ = self.class_encoder_.classes_
        else:
            if isinstance(X, pd.DataFrame):
                X = X.to_numpy()
            y = np.asarray(y, dtype=int)
            self.classes_ = np.arange(0, 1 + np.max(y))

        X, y = check_X_y(X, y)
        X = X.astype(np.int64)
        y = y.astype(np.int64)
        self.row_count_, self.column_count_ = X.shape
        self.n_classes_ = self.classes_.shape[0]
        self.class_values_count_ = np.bincount(y, minlength=self.n_classes_)
        with np.errstate(divide="ignore"):
            self.class_log_count_ = np.log(self.class_values_count_)

        self._compute_probabilities(X, y)
        self._compute_independent_terms()
        return self

    def _joint_log_likelihood(self, X):
        check_is_fitted(self)
        X = self._encode_features(X)
        if X.shape[1] != self.column_count_:
            raise ValueError(f"Expected {self.column_count_} features, got {X.shape[1]} instead")
        log_alpha = np.log(self.alpha) if self.alpha else 0.0
        log_probability = np.zeros((X.shape[0], self.n_classes_))
        for j in range(X.shape[1]):
            log_probability = _predict_single(log_probability,
                                              np.ascontiguousarray(X[:, j], dtype=np.int64),
                                              self.feature_values_count_[j],
                                              self.smoothed_log_counts_[j],
                                              log_alpha)
        return log_probability + self.independent_term_

    def predict(self, X):
        """ Predicts the label of the samples based on the MAP.

        Parameters
        ----------
        X : array-like of shape (n_samples, n_features)
           Array that must be encoded unless
           encode_data is set to True

        Returns
        -------
        y : array-like of shape (n_samples)
            Predicted label for each sample.
        """
        output = np.argmax(self._joint_log_likelihood(X), axis=1)
        return self.classes_[output]

    def predict_log_proba(self, X):
        """ Predicts the log posterior probability for each label of the samples.

        Parameters
        ----------
        X : array-like of shape (n_samples, n_features)
           Array that must be encoded unless
           encode_data is set to True

        Returns
        -------
        y : array-like of shape (n_samples, n_classes)
            Array where `y[i][j]` contains the log posterior probability of the jth class
            for the ith sample, normalized with logsumexp
        """
        probabilities = self._joint_log_likelihood(X)
        log_prob_x = logsumexp(probabilities, axis=1)
        return probabilities - np.atleast_2d(log_prob_x).T

    def predict_proba(self, X):
        """ Predicts the probability for each label of the samples.

        Parameters
        ----------
        X : array-like of shape (n_samples, n_features)
           Array that must be encoded unless
           encode_data is set to True

        Returns
        -------
        y : array-like of shape (n_samples, n_classes)
            Array where `y[i][j]` contains the posterior probability of the jth class for ith
            sample
        """
        return np.exp(self.predict_log_proba(X))

    def leave_one_out_cross_val(self, X, y, fit=True):
        """Efficient LOO accuracy computed by discounting each sample from the fitted counts"""
        if fit:
            self.fit(X, y)
        check_is_fitted(self)
        X = self._encode_features(X)
        if isinstance(y, (pd.Series, pd.DataFrame)):
            y = y.to_numpy().ravel()
        y = self.class_encoder_.transform(y) if self.encode_data else np.asarray(y, dtype=int)
        rows = np.arange(X.shape[0])

        class_counts = np.tile(self.class_values_count_, (X.shape[0], 1)).astype(float)
        class_counts[rows, y] -= 1
        with np.errstate(divide="ignore", invalid="ignore"):
            log_proba = np.log(class_counts)
            for j in range(X.shape[1]):
                values = X[:, j]
                counts = self.feature_counts_[j][values].copy()
                counts[rows, y] -= 1
                # Values only present in the left out sample are no longer seen
                unique_values = self.feature_unique_values_count_[j] - (self.feature_counts_[j].sum(axis=1)[values] == 1)
                log_proba += np.log(counts + self.alpha)
                log_proba -= np.log(class_counts + self.alpha * unique_values.reshape(-1, 1))
        prediction = np.argmax(log_proba, axis=1)
        return np.sum(prediction == y) / y.shape[0]

    def conditional_table(self, feature):
        """Smoothed P(value | class) for one feature.

        Parameters
        ----------
        feature : {int, str}
            Index or name of the feature (column name, or x<index> when
            fitted without column names).

        Returns
        -------
        table : DataFrame of shape (n_values, n_classes)
            Rows are the feature values (bin intervals for binned features),
            columns are the classes.
        """
        check_is_fitted(self)
        if self.encode_data:
            names = self.feature_encoder_.get_feature_names()
        else:
            names = [f"x{j}" for j in range(self.column_count_)]
        if isinstance(feature, str):
            if feature not in names:
                raise ValueError(f"Unknown feature {feature}, expected one of {tuple(names)}")
            feature = names.index(feature)
        if not 0 <= feature < self.column_count_:
            raise ValueError(f"Feature index not valid, expected index between 0 and {self.column_count_ - 1}")

        denominator = self.class_values_count_ + self.alpha * self.feature_unique_values_count_[feature]
        with np.errstate(divide="ignore", invalid="ignore"):
            probabilities = (self.feature_counts_[feature] + self.alpha) / denominator
        index = np.arange(probabilities.shape[0])
        if self.encode_data:
            index = self.feature_encoder_.categories_[feature]
            if feature in self.feature_encoder_.numerical_feature_index_:
                index = [pd.Interval(*self.feature_encoder_.bin_interval(feature, code), closed="left")
                         for code in index]
        table = pd.DataFrame(probabilities, index=index, columns=self.classes_)
        table.index.name = names[feature]
        return table
