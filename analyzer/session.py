import os
import logging

import numpy as np

from utils import resolve_dtype
from analyzer.blocks import iter_blocks
from analyzer.edges import EdgeDetector, EdgeType, MAX_BITS_PER_BYTE
from analyzer.estimator import entropy, total_entropy
from analyzer.events import EventStore

logger = logging.getLogger(__name__)


class ScanResult:
    def __init__(self, filepath, block_size, precision, samples, edges, summary):
        self.filepath = filepath
        self.block_size = block_size
        self.precision = precision
        self.samples = samples
        self.edges = edges
        self.summary = summary

    @property
    def entropies(self):
        return [e for _, e in self.samples]

    def to_dict(self):
        return {
            "file": self.filepath,
            "block_size": self.block_size,
            "precision": self.precision,
            "samples": [
                {"block_index": int(i), "entropy": round(float(e), 6)}
                for i, e in self.samples
            ],
            "edges": [edge.to_dict() for edge in self.edges],
            "summary": self.summary,
        }


class EntropyScan:
    def __init__(self, cfg, event_store=None):
        self.cfg = cfg
        self.event_store = event_store if event_store is not None else EventStore()
        self.last_result = None

    def scan(self, filepath):
        if not os.path.isfile(filepath):
            self.event_store.add_event(
                "ERROR",
                "high",
                f"Input file not found: {filepath}",
                {"file": filepath},
            )
            logger.error("Input file not found: %s", filepath)
            return None

        block_size = self.cfg.BLOCK_SIZE
        dtype = resolve_dtype(self.cfg.PRECISION)
        detector = EdgeDetector(self.cfg.HIGH_THRESHOLD, self.cfg.LOW_THRESHOLD)

        self.event_store.add_event(
            "SCAN_START",
            "info",
            f"Scanning {os.path.basename(filepath)} in {block_size}-byte blocks",
            {"file": filepath, "block_size": block_size, "precision": self.cfg.PRECISION},
        )

        samples = []
        edges = []
        total_bits = 0.0
        byte_count = 0

        for index, block in iter_blocks(filepath, block_size):
            value = entropy(block, dtype)
            samples.append((index, value))
            total_bits += float(total_entropy(block, dtype))
            byte_count += len(block)

            edge = detector.feed(index, value)
            if edge is None:
                continue
            edges.append(edge)

            if edge.edge_type is EdgeType.RISING:
                self.event_store.add_event(
                    "EDGE_RISING",
                    "high",
                    f"Entropy rose to {float(value):.2f} bits/byte at block {index}",
                    edge.to_dict(),
                )
            else:
                self.event_store.add_event(
                    "EDGE_FALLING",
                    "medium",
                    f"Entropy fell to {float(value):.2f} bits/byte at block {index}",
                    edge.to_dict(),
                )

        summary = self._summarize(samples, edges, byte_count, total_bits)
        result = ScanResult(
            filepath, block_size, self.cfg.PRECISION, samples, edges, summary
        )

        self.event_store.add_event(
            "SCAN_COMPLETE",
            "info",
            f"Scanned {summary['blocks']} blocks, "
            f"{summary['rising_edges']} rising / {summary['falling_edges']} falling edge(s)",
            summary,
        )
        logger.info(
            "Scan of %s complete: %d blocks, %d edges",
            filepath, summary["blocks"], len(edges),
        )

        self.last_result = result
        return result

    def _summarize(self, samples, edges, byte_count, total_bits):
        values = np.array([float(e) for _, e in samples], dtype=np.float64)

        if values.size:
            min_entropy = float(values.min())
            max_entropy = float(values.max())
            mean_entropy = float(values.mean())
            normalized = values / MAX_BITS_PER_BYTE
            high_count = np.count_nonzero(normalized >= self.cfg.HIGH_THRESHOLD)
            high_fraction = float(high_count) / values.size
        else:
            min_entropy = max_entropy = mean_entropy = high_fraction = 0.0

        return {
            "blocks": len(samples),
            "bytes": byte_count,
            "min_entropy": round(min_entropy, 6),
            "max_entropy": round(max_entropy, 6),
            "mean_entropy": round(mean_entropy, 6),
            "total_bits": round(total_bits, 3),
            "rising_edges": sum(1 for e in edges if e.edge_type is EdgeType.RISING),
            "falling_edges": sum(1 for e in edges if e.edge_type is EdgeType.FALLING),
            "high_entropy_fraction": round(high_fraction, 6),
            "high_threshold": self.cfg.HIGH_THRESHOLD,
            "low_threshold": self.cfg.LOW_THRESHOLD,
        }

    def reset(self):
        self.last_result = None
        self.event_store.reset()
        logger.info("Scan session reset")
