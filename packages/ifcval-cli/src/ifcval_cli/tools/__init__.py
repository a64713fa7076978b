from .estimate import estimate
from .rules import rules
from .validate import run_batch, validate

__all__ = ["estimate", "rules", "run_batch", "validate"]
