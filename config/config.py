"""
Generator Configuration.

Responsibility boundaries:
- Holds the settings used to build a `BoundedRandomGenerator`.
- Must be passed to the generator explicitly, never read from globals.

Mutation constraints:
- Frozen after initialization.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Immutable container for bounded generator settings.
    """
    seed: Optional[int] = None
    # Reject bounds that do not fit a signed 64-bit integer
    enforce_int64: bool = True
    # Emit a DEBUG audit event for every draw
    log_draws: bool = False
