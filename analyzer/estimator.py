import numpy as np


def _check_dtype(dtype):
    if not (isinstance(dtype, type) and issubclass(dtype, np.floating)):
        raise TypeError(f"dtype must be a numpy floating type, got {dtype!r}")


def entropy(data, dtype=np.float64):
    """Shannon entropy of a byte window in bits per byte (0..8)."""
    _check_dtype(dtype)

    counts = np.bincount(np.frombuffer(data, dtype=np.uint8), minlength=256)
    # Sorted so the reduction only depends on the multiset of counts.
    counts = np.sort(counts[counts > 0])

    result = dtype(0)
    if counts.size == 0:
        return result

    length = dtype(counts.sum())
    p = counts.astype(dtype) / length
    result = result - np.sum(p * np.log2(p), dtype=dtype)
    return dtype(result)


def total_entropy(data, dtype=np.float64):
    return entropy(data, dtype) * dtype(len(data))
