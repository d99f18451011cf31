import pandas as pd

from winebayes.probability import bayes_rule, conditional_probability, naive_bayes_posterior, probability


def conditional_probability_report(wine, target, target_value, feature, feature_value):
    '''P(A), P(B), P(B|A) and P(A|B) for A: target == target_value and B: feature == feature_value.

    P(A|B) is computed both directly and through Bayes' rule.'''
    event = {target: target_value}
    given = {feature: feature_value}
    row = {
        "event": f"{target} == {target_value}",
        "given": f"{feature} == {feature_value}",
        "p_event": probability(wine, **event),
        "p_given": probability(wine, **given),
        "p_given_if_event": conditional_probability(wine, given, event),
        "p_event_if_given": conditional_probability(wine, event, given),
        "p_event_if_given_bayes": bayes_rule(wine, event, given),
    }
    return pd.DataFrame([row])


def manual_posterior_report(wine, target, evidence, alpha=1.0):
    '''Naive Bayes posterior of every class for one piece of evidence, by hand'''
    posterior = naive_bayes_posterior(wine, target, evidence, alpha=alpha)
    report = posterior.reset_index()
    report.columns = [target, "posterior"]
    report["evidence"] = ", ".join(f"{k} == {v}" for k, v in evidence.items())
    return report.sort_values("posterior", ascending=False).reset_index(drop=True)
