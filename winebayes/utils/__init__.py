from ._utils import get_scorer
from ._utils import get_cv_scorer
from ._utils import plot_confusion_matrix
from ._utils import plot_top_words
from ._utils import plot_feature_set_comparison
from ._utils import get_graphs


__all__ = [
    "get_scorer",
    "get_cv_scorer",
    "plot_confusion_matrix",
    "plot_top_words",
    "plot_feature_set_comparison",
    "get_graphs",
]
