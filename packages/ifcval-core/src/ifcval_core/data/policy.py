# ifcval_core/data/policy.py
from __future__ import annotations

import logging
from functools import lru_cache
from importlib.resources import files
from pathlib import Path

from ifcval_core.data.loader import load_yaml_typed
from ifcval_core.models.policy import ValidationPolicy

_logger = logging.getLogger("ifcval.policy")

DEFAULT_POLICY_RESOURCE = "policy.yaml"


@lru_cache(maxsize=1)
def default_policy() -> ValidationPolicy:
    """The bundled policy. Loaded once and shared; the model is frozen."""
    resource = files("ifcval_core.data").joinpath(DEFAULT_POLICY_RESOURCE)
    policy = load_yaml_typed(resource, model=ValidationPolicy)
    _logger.debug("loaded bundled policy (%d known entities)", len(policy.entities.known))
    return policy


def load_validation_policy(path: str | Path | None = None) -> ValidationPolicy:
    """Strongly-typed policy loader (Pydantic v2).

    Without a path the bundled default is returned. A user policy replaces the
    default wholesale; sections it omits fall back to the model defaults.
    """
    if path is None:
        return default_policy()
    policy = load_yaml_typed(Path(path), model=ValidationPolicy)
    _logger.info("loaded validation policy from %s", path)
    return policy
