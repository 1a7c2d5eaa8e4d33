"""Append-only log of completed games, one JSON object per line."""

import json
from pathlib import Path
from typing import List

from pydantic import BaseModel

from .models import ProgressRecord


class ProgressLog(BaseModel):
    """JSON-lines file of ProgressRecords."""

    path: Path

    def append(self, record: ProgressRecord) -> None:
        """Append a record, creating the file and parent directories if needed."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "a") as f:
            f.write(json.dumps(record.model_dump()) + "\n")

    def load(self) -> List[ProgressRecord]:
        """Read all records; a missing file yields an empty list."""
        if not self.path.exists():
            return []

        records = []
        with open(self.path) as f:
            for line in f:
                if line.strip():
                    records.append(ProgressRecord(**json.loads(line)))
        return records
