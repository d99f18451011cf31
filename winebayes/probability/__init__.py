from ._conditional import probability
from ._conditional import conditional_probability
from ._conditional import bayes_rule
from ._conditional import class_priors
from ._conditional import probability_table
from ._conditional import naive_bayes_posterior

__all__ = [
    "probability",
    "conditional_probability",
    "bayes_rule",
    "class_priors",
    "probability_table",
    "naive_bayes_posterior",
]
