from ._validation import split_train_test
from ._validation import tune_naive_bayes
from ._validation import cv_results_frame
from ._validation import class_statistics
from ._validation import evaluate_classifier
from ._validation import NAIVE_BAYES_GRID

__all__ = [
    "split_train_test",
    "tune_naive_bayes",
    "cv_results_frame",
    "class_statistics",
    "evaluate_classifier",
    "NAIVE_BAYES_GRID",
]
