# ifcval_core/models/policy.py
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _upper_names(v):
    if isinstance(v, str):
        v = [v]
    return tuple(str(name).strip().upper() for name in v)


# ---- leaf structs ----

class SchemaRules(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")
    # compared case-sensitively against FILE_SCHEMA
    known: tuple[str, ...] = ("IFC2X3", "IFC4", "IFC4X3_ADD2", "IFC4X3_ADD1", "IFC4X1", "IFC4X2")
    suggested_count: int = Field(default=3, ge=1)

    @property
    def suggested(self) -> tuple[str, ...]:
        return self.known[: self.suggested_count]


class EntityRules(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")
    known: tuple[str, ...] = ()
    unknown_preview_limit: int = Field(default=5, ge=1)

    @field_validator("known", mode="before")
    @classmethod
    def _upper(cls, v):
        return _upper_names(v)


class SpatialStructureRules(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")
    root: str = "IFCPROJECT"
    container: str = "IFCSITE"

    @field_validator("root", "container", mode="before")
    @classmethod
    def _upper(cls, v):
        return str(v).strip().upper()


class PropertySetRules(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")
    container: str = "IFCPROPERTYSET"
    prefix: str = "Pset_"
    standard: tuple[str, ...] = ()

    @field_validator("container", mode="before")
    @classmethod
    def _upper(cls, v):
        return str(v).strip().upper()


class GeometryRules(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")
    entities: tuple[str, ...] = ()

    @field_validator("entities", mode="before")
    @classmethod
    def _upper(cls, v):
        return _upper_names(v)


class IndustryPracticeRules(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")
    owner_history: str = "IFCOWNERHISTORY"
    unit_assignment: str = "IFCUNITASSIGNMENT"
    materials: tuple[str, ...] = ("IFCMATERIAL", "IFCMATERIALLIST", "IFCMATERIALLAYERSET")

    @field_validator("owner_history", "unit_assignment", mode="before")
    @classmethod
    def _upper(cls, v):
        return str(v).strip().upper()

    @field_validator("materials", mode="before")
    @classmethod
    def _upper_materials(cls, v):
        return _upper_names(v)


class EstimatorCoefficients(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")
    seconds_per_kilochar: float = Field(default=0.1, ge=0)
    seconds_per_entity: float = Field(default=0.01, ge=0)
    seconds_per_hundred_lines: float = Field(default=0.05, ge=0)
    min_seconds: float = Field(default=0.5, ge=0)
    max_seconds: float = Field(default=30.0, ge=0)

    @model_validator(mode="after")
    def _check_bounds(self):
        if self.min_seconds > self.max_seconds:
            raise ValueError(
                f"estimator.min_seconds ({self.min_seconds}) must not exceed max_seconds ({self.max_seconds})"
            )
        return self


# ---- root policy ----

class ValidationPolicy(BaseModel):
    """Allow-lists, rule tables and estimator knobs shared by every checker.

    Frozen so a single instance can be shared across concurrent pipelines.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    schemas: SchemaRules = Field(default_factory=SchemaRules)
    entities: EntityRules = Field(default_factory=EntityRules)
    spatial_structure: SpatialStructureRules = Field(default_factory=SpatialStructureRules)
    property_sets: PropertySetRules = Field(default_factory=PropertySetRules)
    geometry: GeometryRules = Field(default_factory=GeometryRules)
    industry_practices: IndustryPracticeRules = Field(default_factory=IndustryPracticeRules)
    estimator: EstimatorCoefficients = Field(default_factory=EstimatorCoefficients)

    @property
    def known_entities(self) -> frozenset[str]:
        return frozenset(self.entities.known)

    @property
    def standard_property_sets(self) -> frozenset[str]:
        return frozenset(name.upper() for name in self.property_sets.standard)
