from ._wine import load_wine
from ._wine import prepare_wine
from ._wine import make_wine_reviews
from ._wine import get_X_y
from ._wine import add_binned_features
from ._wine import WINE_COLUMNS

__all__ = [
    "load_wine",
    "prepare_wine",
    "make_wine_reviews",
    "get_X_y",
    "add_binned_features",
    "WINE_COLUMNS",
]
