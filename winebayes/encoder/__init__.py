from ._custom_ordinal_feature_encoder import CustomOrdinalFeatureEncoder
from ._custom_label_encoder import CustomLabelEncoder

__all__ = [
    "CustomOrdinalFeatureEncoder",
    "CustomLabelEncoder"
]
