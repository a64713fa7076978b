from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Any, TypeVar, overload

import yaml
from pydantic import TypeAdapter, ValidationError

YamlSource = Path | str | Traversable

T = TypeVar("T")


# -------------------------------
# Internal raw YAML reader (single source of truth)
# -------------------------------


def _read_yaml_raw(source: YamlSource) -> Any:
    # Path and package resources (importlib.resources) share is_file/read_text
    p = Path(source) if isinstance(source, str) else source
    if not p.is_file():
        raise FileNotFoundError(f"File not found: {p}")

    try:
        text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ValueError(f"Unable to decode UTF-8 in {p}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {p}: {e}") from e

    if data is None:
        raise ValueError(f"Empty YAML file: {p}")

    return data


# -------------------------------
# Public typed YAML loader
# -------------------------------


@overload
def load_yaml_typed(source: YamlSource, *, adapter: TypeAdapter[T]) -> T: ...


@overload
def load_yaml_typed(source: YamlSource, *, model: type[T]) -> T: ...


def load_yaml_typed(
    source: YamlSource,
    *,
    adapter: TypeAdapter[T] | None = None,
    model: type[T] | None = None,
) -> T:
    """Read YAML and validate/parse it into a typed object using Pydantic v2.

    Exactly one of {adapter, model} must be supplied. ``source`` may be a
    filesystem path or a package resource from ``importlib.resources.files``.

    Example (single model):
        load_yaml_typed("ifcval-policy.yaml", model=ValidationPolicy)

    Example (list of items):
        load_yaml_typed("schemas.yaml", adapter=TypeAdapter(list[str]))
    """
    if (adapter is None) == (model is None):
        raise ValueError("Provide exactly one of 'adapter' or 'model'.")

    data = _read_yaml_raw(source)

    try:
        if adapter is not None:
            return adapter.validate_python(data)
        return TypeAdapter(model).validate_python(data)  # type: ignore[arg-type]
    except ValidationError as e:
        # Normalize error so callers see the file path in the message
        raise ValueError(f"Invalid structure in {source}: {e}") from e
