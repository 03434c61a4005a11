import logging

import numpy as np

from analyzer.estimator import entropy

logger = logging.getLogger(__name__)


def iter_blocks(filepath, block_size):
    if block_size <= 0:
        raise ValueError("block_size must be positive")

    with open(filepath, "rb") as f:
        index = 0
        while True:
            chunk = f.read(block_size)
            if not chunk:
                break
            yield index, chunk
            index += 1


def read_entropy_series(filepath, block_size, dtype=np.float64):
    samples = [
        (index, entropy(block, dtype))
        for index, block in iter_blocks(filepath, block_size)
    ]
    logger.debug("Read %d blocks from %s", len(samples), filepath)
    return samples
