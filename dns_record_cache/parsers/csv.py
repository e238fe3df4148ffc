import csv
import logging
from typing import List, Tuple

logger = logging.getLogger(__name__)


class CSVParser:
    def __init__(self, csv_path: str):
        self.csv_path = csv_path

    def parse(self) -> List[Tuple[str, str]]:
        """Parse CSV file into (zone id, record id) lookup requests."""
        requests = []

        try:
            with open(self.csv_path, "r", newline="") as f:
                reader = csv.DictReader(f)

                if not reader.fieldnames or not {"ZoneID", "RecordID"} <= set(
                    reader.fieldnames
                ):
                    raise ValueError("CSV must contain 'ZoneID' and 'RecordID' columns")

                for row in reader:
                    zone_id = (row["ZoneID"] or "").strip()
                    record_id = (row["RecordID"] or "").strip()
                    requests.append((zone_id, record_id))

            logger.info(f"Successfully parsed {len(requests)} lookups from CSV")

        except FileNotFoundError:
            raise FileNotFoundError(f"CSV file not found: {self.csv_path}")

        return requests
