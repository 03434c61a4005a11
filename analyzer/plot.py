import logging
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from analyzer.edges import EdgeType, MAX_BITS_PER_BYTE

logger = logging.getLogger(__name__)


def save_entropy_plot(result, path, high_threshold, low_threshold, figsize=(18, 4)):
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    indices = [int(i) for i, _ in result.samples]
    values = [float(e) for e in result.entropies]

    fig, ax = plt.subplots(figsize=figsize)
    ax.bar(indices, values, width=1.0, color="#4c72b0")
    ax.axhline(high_threshold * MAX_BITS_PER_BYTE, color="#c44e52", linestyle="--",
               label=f"high ({high_threshold:.2f})")
    ax.axhline(low_threshold * MAX_BITS_PER_BYTE, color="#55a868", linestyle="--",
               label=f"low ({low_threshold:.2f})")

    for edge in result.edges:
        color = "#c44e52" if edge.edge_type is EdgeType.RISING else "#55a868"
        ax.axvline(int(edge.block_index), color=color, alpha=0.5)

    ax.set_xlim(0, max(len(indices), 1))
    ax.set_ylim(0, MAX_BITS_PER_BYTE)
    ax.set_title(f"Entropy per block: {Path(result.filepath).name}")
    ax.set_xlabel(f"Block ({result.block_size:,d} bytes)")
    ax.set_ylabel("Entropy (bits/byte)")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="lower right")

    fig.savefig(str(target), bbox_inches="tight")
    plt.close(fig)
    logger.info("Entropy plot written: %s", target)
    return target
