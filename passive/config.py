"""
Configuration for the sprout learner.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class SproutConfig:
    """Settings of a single sprout run."""

    # Safety valve on the number of congruence states (None = unbounded)
    max_states: Optional[int] = None

    # Candidate targets of one work item checked concurrently on copies
    workers: int = 1

    # Print progress information
    verbose: bool = False

    def __post_init__(self):
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")
        if self.max_states is not None and self.max_states < 1:
            raise ValueError(f"max_states must be positive, got {self.max_states}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for reporting."""
        return {
            'max_states': self.max_states,
            'workers': self.workers,
            'verbose': self.verbose,
        }
