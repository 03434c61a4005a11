import os
import logging

import numpy as np


def setup_logging(log_dir):
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, "analyzer.log")

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    if root.handlers:
        return

    fmt = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    fh = logging.FileHandler(log_file, encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    ch.setFormatter(fmt)
    root.addHandler(ch)


def resolve_dtype(name):
    try:
        dtype = np.dtype(name)
    except TypeError as e:
        raise ValueError(f"Unknown precision: {name!r}") from e
    if dtype.kind != "f":
        raise ValueError(f"Precision must be a floating type, got {name!r}")
    return dtype.type
