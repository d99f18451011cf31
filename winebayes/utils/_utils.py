import os
import plotly.express as px

from sklearn.metrics import accuracy_score, balanced_accuracy_score, cohen_kappa_score, f1_score, make_scorer


def _macro_f1(y_true, y_pred):
    return f1_score(y_true, y_pred, average="macro")


def get_scorer(scoring):
    scores = {"accuracy": accuracy_score,
              "balanced_accuracy": balanced_accuracy_score,
              "f1_score": _macro_f1,
              "kappa": cohen_kappa_score,
    }
    if scoring in scores:
        return scores[scoring]
    raise ValueError(f"The specified scoring {scoring} is not valid. Expected one of {tuple(scores.keys())}")


def get_cv_scorer(scoring):
    '''get_scorer metric wrapped as an estimator scorer for the cross validation searches'''
    return make_scorer(get_scorer(scoring))


def plot_confusion_matrix(matrix, title="Confusion matrix"):
    '''Heatmap of a confusion matrix DataFrame (actual x predicted)'''
    return px.imshow(matrix,
                     text_auto=True,
                     color_continuous_scale="Blues",
                     labels={"x": "Predicted", "y": "Actual", "color": "Count"},
                     title=title)


def plot_top_words(counts, target=None, token_column="word"):
    '''Bar chart of word counts, faceted by class when target is given'''
    fig = px.bar(counts.sort_values("n"),
                 x="n",
                 y=token_column,
                 orientation="h",
                 facet_col=target,
                 facet_col_wrap=3 if target else 0,
                 width=1000)
    if target:
        fig.update_yaxes(matches=None, showticklabels=True)
    return fig


def plot_feature_set_comparison(results):
    '''Cross validated vs test score of every feature set'''
    long = results.melt(id_vars="feature_set",
                        value_vars=["cv_score", "test_score"],
                        var_name="Score",
                        value_name="Value")
    return px.bar(long, x="feature_set", y="Value", color="Score", barmode="group", width=1000)


def get_graphs(results, folder):
    '''Writes the walkthrough graphs as png files into folder.

    results is a dict that may hold "confusion_matrix", "top_words",
    "top_words_by_class" and "comparison" entries.'''
    if not os.path.exists(folder):
        os.makedirs(folder)
    figures = {}
    if "confusion_matrix" in results:
        figures["confusion_matrix.png"] = plot_confusion_matrix(results["confusion_matrix"])
    if "top_words" in results:
        figures["top_words.png"] = plot_top_words(results["top_words"])
    if "top_words_by_class" in results:
        target = [c for c in results["top_words_by_class"].columns if c not in ("word", "n", "proportion")][0]
        figures["top_words_by_class.png"] = plot_top_words(results["top_words_by_class"], target=target)
    if "comparison" in results:
        figures["feature_set_comparison.png"] = plot_feature_set_comparison(results["comparison"])
    for filename, fig in figures.items():
        fig.write_image(os.path.join(folder, filename))
    return list(figures)
