from ._conditional_report import conditional_probability_report
from ._conditional_report import manual_posterior_report
from ._feature_set_comparison import feature_set_comparison
from ._feature_set_comparison import word_feature_comparison
from ._linear_model import linear_model_demo

__all__ = [
    "conditional_probability_report",
    "manual_posterior_report",
    "feature_set_comparison",
    "word_feature_comparison",
    "linear_model_demo",
]
