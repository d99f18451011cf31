import os
import numpy as np
import pandas as pd


WINE_COLUMNS = ["id", "province", "variety", "winery", "year", "price", "points", "description"]

# Profiles of the synthetic sample: varieties, price level and review vocabulary per province
PROVINCES = {
    "Oregon": {
        "weight": 0.25,
        "varieties": ["Pinot Noir", "Pinot Gris", "Chardonnay"],
        "wineries": ["Willamette Ridge", "Dundee Hills Cellars", "Eola Estate"],
        "price": (3.5, 0.4),
        "words": ["pinot", "cherry", "cranberry", "earthy", "forest", "willamette", "bright", "raspberry"],
    },
    "California": {
        "weight": 0.35,
        "varieties": ["Cabernet Sauvignon", "Zinfandel", "Chardonnay", "Pinot Noir"],
        "wineries": ["Napa Crest", "Sonoma Coast Vineyards", "Paso Oaks"],
        "price": (3.8, 0.5),
        "words": ["cabernet", "oak", "vanilla", "blackberry", "ripe", "napa", "rich", "plush"],
    },
    "Marlborough": {
        "weight": 0.15,
        "varieties": ["Sauvignon Blanc", "Pinot Noir"],
        "wineries": ["Wairau Valley", "Awatere Estate"],
        "price": (3.0, 0.3),
        "words": ["grapefruit", "passion", "citrus", "zesty", "gooseberry", "crisp", "herbaceous"],
    },
    "Burgundy": {
        "weight": 0.15,
        "varieties": ["Pinot Noir", "Chardonnay"],
        "wineries": ["Domaine Beaune", "Clos Vougeot", "Maison Meursault"],
        "price": (4.2, 0.6),
        "words": ["mineral", "structured", "elegant", "tannins", "cote", "villages", "age"],
    },
    "New York": {
        "weight": 0.10,
        "varieties": ["Riesling", "Cabernet Franc"],
        "wineries": ["Finger Lakes Cellars", "Seneca Shore"],
        "price": (3.1, 0.3),
        "words": ["riesling", "apple", "peach", "petrol", "lake", "off-dry", "lime"],
    },
}

SHARED_WORDS = ["fruit", "finish", "palate", "acidity", "aromas", "flavors", "drink",
                "the", "and", "of", "with", "this", "is", "a", "wine", "notes"]


def load_wine(path):
    '''Reads a wine review table from a csv, parquet or pickle file'''
    if not os.path.exists(path):
        raise FileNotFoundError(f"Wine data not found: {path}")
    extension = os.path.splitext(str(path))[1].lower()
    if extension == ".csv":
        return pd.read_csv(path)
    if extension == ".parquet":
        return pd.read_parquet(path)
    if extension in (".pkl", ".pickle"):
        return pd.read_pickle(path)
    raise ValueError(f"Unknown file extension {extension}, expected one of ('.csv', '.parquet', '.pkl', '.pickle')")


def prepare_wine(df, target="province", min_class_size=None, keep=None):
    '''Lecture wrangling of the wine table.

    Drops rows without target, price or points, adds the log price (lprice),
    removes classes with less than min_class_size reviews and keeps only the
    requested columns (id and target are always kept).'''
    missing = [c for c in (target, "price", "points") if c not in df.columns]
    if missing:
        raise ValueError(f"Wine table is missing the columns {missing}")
    wine = df.dropna(subset=[target, "price", "points"]).copy()
    wine = wine[wine["price"] > 0]
    if "id" not in wine.columns:
        wine.insert(0, "id", np.arange(1, wine.shape[0] + 1))
    wine["lprice"] = np.log(wine["price"].astype(float))
    if min_class_size is not None:
        counts = wine[target].value_counts()
        wine = wine[wine[target].isin(counts[counts >= min_class_size].index)]
    if keep is not None:
        columns = ["id", target] + [c for c in keep if c not in ("id", target)]
        unknown = [c for c in columns if c not in wine.columns]
        if unknown:
            raise ValueError(f"Unknown columns {unknown}")
        wine = wine[columns]
    return wine.reset_index(drop=True)


def make_wine_reviews(n_samples=600, seed=None):
    '''Synthetic wine reviews with province specific varieties, prices and vocabulary'''
    rng = np.random.default_rng(seed)
    provinces = list(PROVINCES)
    weights = np.array([PROVINCES[p]["weight"] for p in provinces])
    chosen = rng.choice(provinces, size=n_samples, p=weights / weights.sum())

    rows = []
    for i, province in enumerate(chosen, start=1):
        profile = PROVINCES[province]
        mean, sd = profile["price"]
        price = float(np.round(np.exp(rng.normal(mean, sd)), 0))
        points = int(np.clip(np.round(80 + 3 * (np.log(price) - 2.5) + rng.normal(0, 2)), 80, 100))
        own = rng.choice(profile["words"], size=rng.integers(2, 5), replace=False)
        borrowed = rng.choice(PROVINCES[rng.choice(provinces)]["words"], size=1)
        shared = rng.choice(SHARED_WORDS, size=rng.integers(4, 9))
        words = list(own) + list(borrowed) + list(shared)
        rng.shuffle(words)
        rows.append([i,
                     province,
                     rng.choice(profile["varieties"]),
                     rng.choice(profile["wineries"]),
                     int(rng.integers(2005, 2020)),
                     price,
                     points,
                     (" ".join(words)).capitalize() + "."])
    return pd.DataFrame(rows, columns=WINE_COLUMNS)


def get_X_y(df, target, features=None):
    if target not in df.columns:
        raise ValueError(f"Unknown target {target}, expected one of {tuple(df.columns)}")
    if features is None:
        features = [c for c in df.columns if c != target]
    unknown = [c for c in features if c not in df.columns]
    if unknown:
        raise ValueError(f"Unknown features {unknown}")
    return df[list(features)], df[target]


def add_binned_features(df, bins, strategy="quantile", suffix="_bin"):
    '''Adds ordinal bin codes for continuous columns.

    bins maps column names to a number of bins. Quantile bins use pd.qcut
    (repeated edges are dropped), uniform bins pd.cut.'''
    if strategy not in ("quantile", "uniform"):
        raise ValueError(f"Unknown strategy {strategy}, expected one of ('quantile', 'uniform')")
    df = df.copy()
    for column, n_bins in bins.items():
        if column not in df.columns:
            raise ValueError(f"Unknown column {column}, expected one of {tuple(df.columns)}")
        if strategy == "quantile":
            binned = pd.qcut(df[column], q=n_bins, labels=False, duplicates="drop")
        else:
            binned = pd.cut(df[column], bins=n_bins, labels=False)
        df[column + suffix] = binned.astype("Int64")
    return df
