## Pydantic schemas for the roadmap returned by the model
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

SkillLevel = Literal["beginner", "intermediate", "advanced"]
ResourceType = Literal["course", "book", "documentation", "project", "tutorial"]


class _RoadmapModel(BaseModel):
    # Wire format is camelCase; snake_case is accepted too. Models ignore
    # unknown keys and cannot be mutated after construction.
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class Resource(_RoadmapModel):
    type: ResourceType
    title: str
    url: Optional[str] = None
    description: str

    @field_validator("type", mode="before")
    @classmethod
    def _normalize_type(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    @property
    def link(self) -> str | None:
        """The URL, if it is safe to render as an external link."""
        if self.url and self.url.strip().lower().startswith(("http://", "https://")):
            return self.url.strip()
        return None


class RoadmapSkill(_RoadmapModel):
    id: str
    title: str
    description: str
    level: SkillLevel
    estimated_time: str
    prerequisites: List[str] = Field(default_factory=list)
    resources: List[Resource] = Field(default_factory=list)

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v):
        return v.strip().lower() if isinstance(v, str) else v


class RoadmapPath(_RoadmapModel):
    id: str
    title: str
    description: str
    category: str
    estimated_duration: str
    skills: List[RoadmapSkill] = Field(min_length=1)


class CareerRoadmap(_RoadmapModel):
    career: str
    description: str
    overview: str
    market_demand: str
    average_salary: str
    key_skills: List[str]
    paths: List[RoadmapPath] = Field(min_length=1)

    def to_wire(self) -> dict:
        """camelCase dict in the same shape the model is asked to return."""
        return self.model_dump(by_alias=True, exclude_none=True)
