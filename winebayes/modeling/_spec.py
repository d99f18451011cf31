import numpy as np
import pandas as pd
import patsy
import statsmodels.formula.api as smf

from sklearn.linear_model import LinearRegression

from winebayes.naive_bayes import NaiveBayes


MODELS = {
    "linear_reg": {
        "title": "Linear Regression",
        "modes": ("regression",),
        "engines": ("lm", "sklearn"),
        "default_engine": "lm",
    },
    "naive_bayes": {
        "title": "Naive Bayes",
        "modes": ("classification",),
        "engines": ("winebayes",),
        "default_engine": "winebayes",
    },
}


def _parse_formula(formula, data):
    '''Response and predictor columns of "y ~ a + b" (or "y ~ .") formulas'''
    if formula.count("~") != 1:
        raise ValueError(f"Formula {formula!r} must have the form 'response ~ predictors'")
    response, predictors = (side.strip() for side in formula.split("~"))
    if predictors == ".":
        predictors = [c for c in data.columns if c != response]
    else:
        predictors = [term.strip() for term in predictors.split("+") if term.strip()]
    unknown = [c for c in [response] + predictors if c not in data.columns]
    if unknown:
        raise ValueError(f"Unknown columns {unknown} in formula {formula!r}")
    return response, predictors


class ModelSpec:
    """Declarative description of a model: what to fit, in which mode and with which engine.

    Specs are immutable, every setter returns a new spec so a base
    specification can be shared between fits.

    Parameters
    ----------
    model : str {linear_reg,naive_bayes}
        Model type.

    mode : str, default=None
        "regression" or "classification", the only mode of the model when None.

    engine : str, default=None
        Computational engine, the model default when None.

    args : dict, default=None
        Main model arguments (e.g. alpha for naive_bayes).

    engine_args : dict, default=None
        Arguments passed straight to the engine.
    """

    def __init__(self, model, mode=None, engine=None, args=None, engine_args=None):
        if model not in MODELS:
            raise ValueError(f"Unknown model {model}, expected one of {tuple(MODELS)}")
        description = MODELS[model]
        mode = mode or description["modes"][0]
        engine = engine or description["default_engine"]
        if mode not in description["modes"]:
            raise ValueError(f"Mode {mode} not available for {model}, expected one of {description['modes']}")
        if engine not in description["engines"]:
            raise ValueError(f"Engine {engine} not available for {model}, expected one of {description['engines']}")
        self.model = model
        self.mode = mode
        self.engine = engine
        self.args = dict(args or {})
        self.engine_args = dict(engine_args or {})

    def _replace(self, **changes):
        params = dict(model=self.model, mode=self.mode, engine=self.engine,
                      args=self.args, engine_args=self.engine_args)
        params.update(changes)
        return ModelSpec(**params)

    def set_engine(self, engine, **engine_args):
        return self._replace(engine=engine, engine_args=engine_args)

    def set_mode(self, mode):
        return self._replace(mode=mode)

    def set_args(self, **args):
        return self._replace(args={**self.args, **args})

    def __repr__(self):
        title = MODELS[self.model]["title"]
        lines = [f"{title} Model Specification ({self.mode})", ""]
        if self.args:
            lines.append("Main Arguments:")
            lines.extend(f"  {key} = {value}" for key, value in self.args.items())
            lines.append("")
        lines.append(f"Computational engine: {self.engine}")
        return "\n".join(lines)

    def fit(self, formula, data):
        """Fits the specification.

        Parameters
        ----------
        formula : str
            Model formula, "response ~ a + b". Linear models accept any patsy
            formula, naive_bayes takes plain column names or ".".

        data : DataFrame
            Training data.

        Returns
        -------
        fitted : FittedModel
        """
        if self.engine == "lm":
            fit = smf.ols(formula, data=data, **self.engine_args).fit()
            return FittedModel(self, formula, fit)
        if self.engine == "sklearn":
            y, X = patsy.dmatrices(formula, data, return_type="dataframe")
            fit = LinearRegression(fit_intercept=False, **self.engine_args).fit(X, y.iloc[:, 0])
            n_obs, n_terms = X.shape
            r_squared = fit.score(X, y.iloc[:, 0])
            statistics = {
                "r_squared": r_squared,
                "adj_r_squared": 1 - (1 - r_squared) * (n_obs - 1) / max(n_obs - n_terms, 1),
                "n_obs": n_obs,
            }
            return FittedModel(self, formula, fit, design_info=X.design_info,
                               columns=list(X.columns), statistics=statistics)
        response, predictors = _parse_formula(formula, data)
        if self.mode == "classification" and pd.api.types.is_float_dtype(data[response]):
            raise ValueError(f"Response {response} is continuous, a classification model needs a categorical response")
        fit = NaiveBayes(**{**self.args, **self.engine_args}).fit(data[predictors], data[response])
        return FittedModel(self, formula, fit, columns=predictors)


class FittedModel:
    '''A fitted ModelSpec with a uniform predict / tidy / glance interface'''

    def __init__(self, spec, formula, fit, design_info=None, columns=None, statistics=None):
        self.spec = spec
        self.formula = formula
        self.fit = fit
        self.design_info = design_info
        self.columns = columns
        self.statistics = statistics

    def __repr__(self):
        return f"<FittedModel {self.spec.model} [{self.spec.engine}] {self.formula}>"

    def predict(self, new_data):
        '''Predictions as a DataFrame with a .pred (regression) or .pred_class column'''
        if self.spec.engine == "lm":
            prediction = np.asarray(self.fit.predict(new_data))
            return pd.DataFrame({".pred": prediction}, index=new_data.index)
        if self.spec.engine == "sklearn":
            X = patsy.build_design_matrices([self.design_info], new_data, return_type="dataframe")[0]
            return pd.DataFrame({".pred": self.fit.predict(X)}, index=X.index)
        prediction = self.fit.predict(new_data[self.columns])
        return pd.DataFrame({".pred_class": prediction}, index=new_data.index)

    def predict_proba(self, new_data):
        if self.spec.mode != "classification":
            raise ValueError("Class probabilities are only available for classification models")
        proba = self.fit.predict_proba(new_data[self.columns])
        return pd.DataFrame(proba, columns=[f".pred_{c}" for c in self.fit.classes_], index=new_data.index)

    def tidy(self):
        '''One row per model term with its estimate'''
        if self.spec.engine == "lm":
            return pd.DataFrame({
                "term": self.fit.params.index,
                "estimate": self.fit.params.to_numpy(),
                "std_error": self.fit.bse.to_numpy(),
                "statistic": self.fit.tvalues.to_numpy(),
                "p_value": self.fit.pvalues.to_numpy(),
            })
        if self.spec.engine == "sklearn":
            return pd.DataFrame({"term": self.columns, "estimate": np.ravel(self.fit.coef_)})
        raise ValueError(f"tidy is only available for linear models, not {self.spec.model}")

    def glance(self):
        '''One row summary of the fit'''
        if self.spec.engine == "lm":
            return pd.DataFrame([{
                "r_squared": self.fit.rsquared,
                "adj_r_squared": self.fit.rsquared_adj,
                "aic": self.fit.aic,
                "n_obs": int(self.fit.nobs),
            }])
        if self.spec.engine == "sklearn":
            return pd.DataFrame([self.statistics])
        return pd.DataFrame([{"n_obs": self.fit.row_count_,
                              "n_features": self.fit.column_count_,
                              "n_classes": self.fit.n_classes_}])


def linear_reg(mode="regression", engine="lm"):
    return ModelSpec("linear_reg", mode=mode, engine=engine)


def naive_bayes(alpha=1.0, n_bins=5, mode="classification", engine="winebayes"):
    return ModelSpec("naive_bayes", mode=mode, engine=engine, args={"alpha": alpha, "n_bins": n_bins})
