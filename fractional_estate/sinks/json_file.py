"""JSON file sink for exporting events to files."""

import json
from pathlib import Path
from typing import Any

from fractional_estate.exceptions import SinkError
from fractional_estate.sinks.serialization import to_dict


class JsonFileSink:
    """Output events to JSON files, one file per topic.

    Batches for a topic already written during this sink's lifetime are
    appended to the same file.
    """

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._records: dict[str, list[dict]] = {}

    def path_for(self, topic: str) -> Path:
        # Dots in topic names become underscores
        return self.output_dir / (topic.replace(".", "_") + ".json")

    def write_batch(self, topic: str, records: list[Any]) -> None:
        """Write a batch of records to the topic's JSON file."""
        data = self._records.setdefault(topic, [])
        data.extend(to_dict(record) for record in records)

        try:
            with open(self.path_for(topic), "w", encoding="utf-8") as f:
                if self.pretty:
                    json.dump(data, f, indent=2, ensure_ascii=False, default=str)
                else:
                    json.dump(data, f, ensure_ascii=False, default=str)
        except OSError as exc:
            raise SinkError(f"Cannot write {topic} to {self.output_dir}: {exc}") from exc

    def close(self) -> None:
        """Print summary."""
        print(f"JSON files written to: {self.output_dir}")
        for topic, records in self._records.items():
            print(f"  {topic}: {len(records)} records")
