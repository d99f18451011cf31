from ._custom_encoder_test import test_same_codes_as_ordinal_encoder
from ._custom_encoder_test import test_encoder_unseen_values
from ._custom_encoder_test import test_float_columns_are_binned
from ._custom_encoder_test import test_encoder_wrong_number_of_features
from ._custom_encoder_test import test_label_encoder
from ._custom_encoder_test import test_label_encoder_not_fitted
from ._custom_encoder_test import test_numeric_values_keep_their_order
from ._data_test import test_make_wine_reviews
from ._data_test import test_prepare_wine
from ._data_test import test_prepare_wine_min_class_size
from ._data_test import test_get_X_y
from ._data_test import test_add_binned_features
from ._data_test import test_load_wine
from ._executions_test import test_conditional_probability_report
from ._executions_test import test_manual_posterior_report
from ._executions_test import test_feature_set_comparison
from ._executions_test import test_word_feature_comparison
from ._executions_test import test_linear_model_demo
from ._executions_test import test_scoring_drives_the_search
from ._model_selection_test import test_split_is_stratified
from ._model_selection_test import test_tune_naive_bayes
from ._model_selection_test import test_evaluate_classifier
from ._model_selection_test import test_class_statistics_perfect_predictions
from ._modeling_test import test_engines_agree
from ._modeling_test import test_lm_slope_is_positive
from ._modeling_test import test_specs_are_immutable
from ._modeling_test import test_invalid_specifications
from ._modeling_test import test_naive_bayes_spec
from ._modeling_test import test_naive_bayes_rejects_continuous_response
from ._naive_bayes_test import test_predict_proba_is_normalized
from ._naive_bayes_test import test_matches_manual_posterior
from ._naive_bayes_test import test_same_predictions_as_categorical_nb
from ._naive_bayes_test import test_pre_encoded_data
from ._naive_bayes_test import test_unseen_values
from ._naive_bayes_test import test_continuous_features_are_binned
from ._naive_bayes_test import test_conditional_table_sums_to_one
from ._naive_bayes_test import test_leave_one_out_matches_refitting
from ._naive_bayes_test import test_grid_search
from ._naive_bayes_test import test_wrong_number_of_features
from ._naive_bayes_test import test_many_bins_stay_ordered
from ._naive_bayes_test import test_ties_go_to_the_first_class
from ._naive_bayes_test import test_conditional_table_without_column_names
from ._probability_test import test_probability
from ._probability_test import test_conditional_probability
from ._probability_test import test_bayes_rule_equals_direct_computation
from ._probability_test import test_empty_condition
from ._probability_test import test_class_priors
from ._probability_test import test_probability_table_smoothing
from ._probability_test import test_naive_bayes_posterior
from ._probability_test import test_naive_bayes_posterior_unseen_value
from ._probability_test import test_empty_conditioning_event
from ._text_test import test_unnest_tokens
from ._text_test import test_remove_stop_words
from ._text_test import test_count_words
from ._text_test import test_top_words_by_class
from ._text_test import test_document_term_matrix
from ._text_test import test_word_presence_transformer
from ._text_test import test_add_word_features
from ._utils_test import test_get_scorer
from ._utils_test import test_plots
from ._utils_test import test_get_cv_scorer

__all__ = [
    "test_same_codes_as_ordinal_encoder",
    "test_encoder_unseen_values",
    "test_float_columns_are_binned",
    "test_encoder_wrong_number_of_features",
    "test_label_encoder",
    "test_label_encoder_not_fitted",
    "test_numeric_values_keep_their_order",
    "test_make_wine_reviews",
    "test_prepare_wine",
    "test_prepare_wine_min_class_size",
    "test_get_X_y",
    "test_add_binned_features",
    "test_load_wine",
    "test_conditional_probability_report",
    "test_manual_posterior_report",
    "test_feature_set_comparison",
    "test_word_feature_comparison",
    "test_linear_model_demo",
    "test_scoring_drives_the_search",
    "test_split_is_stratified",
    "test_tune_naive_bayes",
    "test_evaluate_classifier",
    "test_class_statistics_perfect_predictions",
    "test_engines_agree",
    "test_lm_slope_is_positive",
    "test_specs_are_immutable",
    "test_invalid_specifications",
    "test_naive_bayes_spec",
    "test_naive_bayes_rejects_continuous_response",
    "test_predict_proba_is_normalized",
    "test_matches_manual_posterior",
    "test_same_predictions_as_categorical_nb",
    "test_pre_encoded_data",
    "test_unseen_values",
    "test_continuous_features_are_binned",
    "test_conditional_table_sums_to_one",
    "test_leave_one_out_matches_refitting",
    "test_grid_search",
    "test_wrong_number_of_features",
    "test_many_bins_stay_ordered",
    "test_ties_go_to_the_first_class",
    "test_conditional_table_without_column_names",
    "test_probability",
    "test_conditional_probability",
    "test_bayes_rule_equals_direct_computation",
    "test_empty_condition",
    "test_class_priors",
    "test_probability_table_smoothing",
    "test_naive_bayes_posterior",
    "test_naive_bayes_posterior_unseen_value",
    "test_empty_conditioning_event",
    "test_unnest_tokens",
    "test_remove_stop_words",
    "test_count_words",
    "test_top_words_by_class",
    "test_document_term_matrix",
    "test_word_presence_transformer",
    "test_add_word_features",
    "test_get_scorer",
    "test_plots",
    "test_get_cv_scorer",
]
