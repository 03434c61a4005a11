import logging
from enum import Enum

logger = logging.getLogger(__name__)

MAX_BITS_PER_BYTE = 8


class EdgeType(Enum):
    RISING = "rising"
    FALLING = "falling"


class Edge:
    def __init__(self, block_index, edge_type, normalized_entropy):
        self.block_index = block_index
        self.edge_type = edge_type
        self.normalized_entropy = normalized_entropy

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return (
            self.block_index == other.block_index
            and self.edge_type is other.edge_type
            and self.normalized_entropy == other.normalized_entropy
        )

    def __repr__(self):
        return (
            f"Edge(block_index={self.block_index}, edge_type={self.edge_type.name}, "
            f"normalized_entropy={float(self.normalized_entropy):.4f})"
        )

    def to_dict(self):
        return {
            "block_index": int(self.block_index),
            "type": self.edge_type.value,
            "normalized_entropy": round(float(self.normalized_entropy), 6),
        }


class EdgeDetector:
    """Hysteresis trigger over normalized entropy samples.

    After a rising edge the signal has to drop below ``high_threshold`` before
    another edge can fire; after a falling edge (or before any edge) it has to
    climb above ``low_threshold``. Callers must keep
    ``high_threshold >= low_threshold``.
    """

    def __init__(self, high_threshold, low_threshold):
        self.high_threshold = high_threshold
        self.low_threshold = low_threshold
        self.reset()

    def reset(self):
        self.last_edge = None
        self.armed = True

    def feed(self, block_index, entropy_bits):
        normalized = entropy_bits / MAX_BITS_PER_BYTE

        if self.last_edge is EdgeType.RISING:
            if normalized < self.high_threshold:
                self.armed = True
        elif normalized > self.low_threshold:
            self.armed = True

        if not self.armed:
            return None

        if normalized >= self.high_threshold:
            edge_type = EdgeType.RISING
        elif normalized <= self.low_threshold:
            edge_type = EdgeType.FALLING
        else:
            return None

        self.last_edge = edge_type
        self.armed = False
        logger.debug(
            "%s edge at block %d (normalized entropy %.4f)",
            edge_type.name.capitalize(), block_index, normalized,
        )
        return Edge(block_index, edge_type, normalized)


def detect_edges(samples, high_threshold, low_threshold):
    detector = EdgeDetector(high_threshold, low_threshold)
    edges = []
    for block_index, entropy_bits in samples:
        edge = detector.feed(block_index, entropy_bits)
        if edge is not None:
            edges.append(edge)
    return edges
