import os
import json
import logging
from datetime import datetime

logger = logging.getLogger(__name__)


class ScanReporter:
    def __init__(self, report_dir):
        self.report_dir = report_dir
        os.makedirs(report_dir, exist_ok=True)

    def generate_report(self, result, event_data):
        timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
        scan_id = f"SCAN-{timestamp}"
        filename = f"{scan_id}.json"
        filepath = os.path.join(self.report_dir, filename)

        scan = result.to_dict()
        report = {
            "scan_id": scan_id,
            "generated_at": datetime.now().isoformat(),
            "file": scan["file"],
            "block_size": scan["block_size"],
            "precision": scan["precision"],
            "summary": scan["summary"],
            "edges": scan["edges"],
            "samples": scan["samples"],
            "event_timeline": event_data.get("events", []),
            "event_count": len(event_data.get("events", [])),
        }

        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2, default=str)

        logger.info("Scan report written: %s", filepath)
        return filepath
