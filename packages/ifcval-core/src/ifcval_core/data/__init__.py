from .policy import default_policy, load_validation_policy

__all__ = [
    "default_policy",
    "load_validation_policy",
]
