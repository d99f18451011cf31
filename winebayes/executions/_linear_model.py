from winebayes.modeling import linear_reg


def linear_model_demo(wine, formula="lprice ~ points", engine="lm", verbose=0):
    '''Fits a declarative linear regression specification and returns its tidy and glance tables'''
    spec = linear_reg().set_engine(engine)
    if verbose:
        print(spec)
    fitted = spec.fit(formula, data=wine)
    return fitted.tidy(), fitted.glance()
