from ._spec import ModelSpec
from ._spec import FittedModel
from ._spec import linear_reg
from ._spec import naive_bayes

__all__ = [
    "ModelSpec",
    "FittedModel",
    "linear_reg",
    "naive_bayes",
]
