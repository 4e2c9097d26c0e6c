from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class AuditEntry:
    timestamp: datetime
    action: str              # "analyze", "upload", "reset"
    species_id: Optional[str]
    count: Optional[int]
    outcome: str             # Error tag, or "viable: 1, 2, 3"
    rationale: str = ""
