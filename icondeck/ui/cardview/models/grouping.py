"""
Grouping policy models.

Tagged variant selecting how a filtered sequence is bucketed for display.
"""
from typing import Dict, List, Literal, Union
from pydantic import BaseModel, ConfigDict, Field, model_validator

from icondeck.catalog.models import IconEntry

DisplayGroup = Dict[str, List[IconEntry]]

FEATURED = "featured"
SECONDARY = "secondary"
STANDARD = "standard"


class SliceSpec(BaseModel):
    """Human-authored half-open range `[start, end)` of a collection."""
    model_config = ConfigDict(frozen=True)

    label: str = Field(..., min_length=1)
    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)

    @model_validator(mode="after")
    def _check_bounds(self) -> "SliceSpec":
        if self.end < self.start:
            raise ValueError(f"Slice '{self.label}': end ({self.end}) < start ({self.start})")
        return self


class AlphabeticalPolicy(BaseModel):
    """Bucket by uppercase first character of the name."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["alphabetical"] = "alphabetical"


class FixedSlicesPolicy(BaseModel):
    """Static, ordered partition of a collection into labelled ranges."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["fixed_slices"] = "fixed_slices"
    slices: List[SliceSpec] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_labels(self) -> "FixedSlicesPolicy":
        labels = [s.label for s in self.slices]
        if len(labels) != len(set(labels)):
            raise ValueError("Slice labels must be unique")
        return self

    @classmethod
    def from_ranges(cls, *ranges) -> "FixedSlicesPolicy":
        """
        Build from `(label, start, end)` tuples.

        Example:
            FixedSlicesPolicy.from_ranges(("Recent", 0, 4), ("Material", 4, 8))
        """
        return cls(slices=[SliceSpec(label=label, start=start, end=end) for label, start, end in ranges])


class FeatureSplitPolicy(BaseModel):
    """Rank split: 1 featured, 2 secondary, the rest standard."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["feature_split"] = "feature_split"


GroupingPolicy = Union[AlphabeticalPolicy, FixedSlicesPolicy, FeatureSplitPolicy]


class FeatureTiers(BaseModel):
    """Result of a feature split over one category."""
    model_config = ConfigDict(frozen=True)

    featured: List[IconEntry] = Field(default_factory=list)
    secondary: List[IconEntry] = Field(default_factory=list)
    standard: List[IconEntry] = Field(default_factory=list)

    def as_group(self) -> DisplayGroup:
        return {
            FEATURED: list(self.featured),
            SECONDARY: list(self.secondary),
            STANDARD: list(self.standard),
        }
