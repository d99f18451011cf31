import numpy as np
import pandas as pd


def _mask(df, conditions):
    if not conditions:
        return pd.Series(True, index=df.index)
    mask = pd.Series(True, index=df.index)
    for column, value in conditions.items():
        if column not in df.columns:
            raise ValueError(f"Unknown column {column}, expected one of {tuple(df.columns)}")
        mask &= df[column] == value
    return mask


def probability(df, **conditions):
    '''P(column_1 == value_1, ..., column_n == value_n)'''
    if df.shape[0] == 0:
        raise ValueError("Cannot compute probabilities on an empty table")
    return _mask(df, conditions).mean()


def conditional_probability(df, event, given):
    '''P(event | given) as count(event & given) / count(given).

    event and given are dicts mapping column names to values.'''
    if not given:
        raise ValueError("The conditioning event needs at least one column")
    given_mask = _mask(df, given)
    n_given = given_mask.sum()
    if n_given == 0:
        raise ValueError(f"No rows satisfy the conditioning event {given}")
    return (given_mask & _mask(df, event)).sum() / n_given


def bayes_rule(df, event, given):
    '''P(event | given) computed as P(given | event) * P(event) / P(given)'''
    if not given:
        raise ValueError("The conditioning event needs at least one column")
    p_given = probability(df, **given)
    if p_given == 0:
        raise ValueError(f"No rows satisfy the conditioning event {given}")
    p_event = probability(df, **event)
    if p_event == 0:
        return 0.0
    return conditional_probability(df, given, event) * p_event / p_given


def class_priors(df, target):
    '''P(class) for every value of the target column'''
    if target not in df.columns:
        raise ValueError(f"Unknown target {target}, expected one of {tuple(df.columns)}")
    return df[target].value_counts(normalize=True).sort_index().rename("P")


def probability_table(df, feature, target, alpha=0.0):
    '''P(feature = value | class) with additive smoothing.

    Rows are the values of the feature, columns the classes. Smoothing follows
    (count(value, class) + alpha) / (count(class) + alpha * n_values)'''
    for column in (feature, target):
        if column not in df.columns:
            raise ValueError(f"Unknown column {column}, expected one of {tuple(df.columns)}")
    counts = (df.groupby([feature, target], sort=True)
                .size()
                .unstack(target, fill_value=0))
    n_values = counts.shape[0]
    class_counts = counts.sum(axis=0)
    table = (counts + alpha) / (class_counts + alpha * n_values)
    table.columns.name = target
    return table


def naive_bayes_posterior(df, target, evidence, alpha=0.0):
    '''P(class | evidence) under the naive independence assumption.

    Multiplies the prior by P(feature = value | class) for each feature of
    the evidence and normalizes over the classes. Values never seen for a
    feature contribute alpha / (count(class) + alpha * n_values).'''
    priors = class_priors(df, target)
    joint = priors.copy()
    class_counts = df[target].value_counts().reindex(priors.index)
    for feature, value in evidence.items():
        table = probability_table(df, feature, target, alpha=alpha)
        if value in table.index:
            likelihood = table.loc[value]
        else:
            likelihood = alpha / (class_counts + alpha * table.shape[0])
        joint = joint * likelihood.reindex(priors.index).to_numpy()
    total = joint.sum()
    if total == 0 or np.isnan(total):
        raise ValueError(f"Evidence {evidence} has probability zero for every class, use alpha > 0")
    return (joint / total).rename("posterior")
