import os
import argparse

from winebayes.data import load_wine, make_wine_reviews, prepare_wine
from winebayes.executions import (conditional_probability_report, feature_set_comparison, linear_model_demo,
                                  manual_posterior_report, word_feature_comparison)
from winebayes.text import remove_stop_words, top_words, top_words_by_class, unnest_tokens
from winebayes.utils import get_graphs

'''
Global Variables
'''
feature_sets = {
    "variety": ["variety"],
    "variety + price + points": ["variety", "price", "points"],
    "variety + price + points + year + winery": ["variety", "price", "points", "year", "winery"],
}
stop_words = ["wine"]
param_grid = {
    "alpha": [0.5, 1.0, 2.0],
    "n_bins": [3, 5, 8],
}


#######################Initiate the parser##########################
parser = argparse.ArgumentParser(description="Naive Bayes walkthrough on wine reviews")

parser.add_argument("--data", default=None, help="csv, parquet or pickle wine table (synthetic sample if omitted)")
parser.add_argument("--target", default="province", help="class column")
parser.add_argument("--seed", default=200, type=int, help="random seed")
parser.add_argument("--test-size", default=0.2, type=float, help="share of the test split")
parser.add_argument("--n-splits", default=5, type=int, help="cross validation folds")
parser.add_argument("--n-words", default=[10, 25, 50], type=int, nargs="+", help="word feature sizes")
parser.add_argument("--min-class-size", default=None, type=int, help="drop smaller classes")
parser.add_argument("--out", default="out", help="output folder")
parser.add_argument("--graphs", action="store_true", help="write png graphs")
parser.add_argument("--verbose", default=1, type=int, help="progress output")

args = parser.parse_args()
target = args.target
seed = args.seed
verbose = args.verbose
graphs_folder = os.path.join(args.out, "graphs")
csv_folder = os.path.join(args.out, "csv")

for directory in [graphs_folder, csv_folder]:
    if not os.path.exists(directory):
        os.makedirs(directory)

if args.data is None:
    raw = make_wine_reviews(n_samples=2000, seed=seed)
else:
    raw = load_wine(args.data)
wine = prepare_wine(raw, target=target, min_class_size=args.min_class_size)
if verbose:
    print(f"{wine.shape[0]} reviews, {wine[target].nunique()} classes of {target}")

#(a) Conditional probability by hand
target_value = wine[target].mode()[0]
variety = wine.loc[wine[target] == target_value, "variety"].mode()[0]
report = conditional_probability_report(wine, target, target_value, "variety", variety)
report.to_csv(os.path.join(csv_folder, "conditional_probability.csv"), index=False)
posterior = manual_posterior_report(wine, target, {"variety": variety})
posterior.to_csv(os.path.join(csv_folder, "manual_posterior.csv"), index=False)
if verbose:
    print(report.T.to_string(header=False))

#(b) Naive Bayes on structured features
available_sets = {name: features for name, features in feature_sets.items()
                  if all(f in wine.columns for f in features)}
comparison, evaluations = feature_set_comparison(wine, target, available_sets,
                                                 param_grid=param_grid,
                                                 test_size=args.test_size,
                                                 n_splits=args.n_splits,
                                                 seed=seed,
                                                 verbose=verbose)
comparison.to_csv(os.path.join(csv_folder, "feature_set_comparison.csv"), index=False)
best_set = comparison.loc[comparison["test_accuracy"].idxmax(), "feature_set"]
confusion = evaluations[best_set]["confusion_matrix"]
confusion.to_csv(os.path.join(csv_folder, "confusion_matrix.csv"))
evaluations[best_set]["class_statistics"].to_csv(os.path.join(csv_folder, "class_statistics.csv"))
if verbose:
    print(comparison.to_string(index=False))
    print(evaluations[best_set]["report"])

#(c) Tidy text and word features
tokens = remove_stop_words(unnest_tokens(wine), extra=stop_words)
words = top_words(tokens, n=20)
words_by_class = top_words_by_class(tokens, wine, target, n=10)
words.to_csv(os.path.join(csv_folder, "top_words.csv"), index=False)
words_by_class.to_csv(os.path.join(csv_folder, "top_words_by_class.csv"), index=False)
word_comparison, _, vocabularies = word_feature_comparison(wine, target, available_sets[best_set],
                                                           n_words=args.n_words,
                                                           stop_words=stop_words,
                                                           param_grid=param_grid,
                                                           test_size=args.test_size,
                                                           n_splits=args.n_splits,
                                                           seed=seed,
                                                           verbose=verbose)
word_comparison.to_csv(os.path.join(csv_folder, "word_feature_comparison.csv"), index=False)
if verbose:
    print(word_comparison.to_string(index=False))

#(d) Declarative linear model
tidy, glance = linear_model_demo(wine, formula="lprice ~ points", verbose=verbose)
tidy.to_csv(os.path.join(csv_folder, "linear_model_tidy.csv"), index=False)
glance.to_csv(os.path.join(csv_folder, "linear_model_glance.csv"), index=False)
if verbose:
    print(tidy.to_string(index=False))

if args.graphs:
    get_graphs({"confusion_matrix": confusion,
                "top_words": words,
                "top_words_by_class": words_by_class,
                "comparison": comparison},
               folder=graphs_folder)
