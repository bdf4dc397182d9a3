"""Answer set model.

Holds every attribute collected by the wizard. Instances are immutable
snapshots; each user edit produces a new snapshot through ``with_changes``.
Numeric inputs are kept as the raw text the user typed so that validation
and valuation can apply their own parsing rules.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator


class PropertyKind(str, Enum):
    """Property category."""

    HOUSE = "house"
    APARTMENT = "apartment"


class Condition(str, Enum):
    """Renovation state, only asked for buildings older than 15 years."""

    GOOD = "good"
    NEEDS_RENOVATION = "needs_renovation"


class YesNo(str, Enum):
    """Answer to an amenity question."""

    YES = "yes"
    NO = "no"


# Portuguese labels used in the UI and in the submission payload
KIND_LABELS: dict[PropertyKind, str] = {
    PropertyKind.HOUSE: "Moradia",
    PropertyKind.APARTMENT: "Apartamento",
}

YES_NO_LABELS: dict[YesNo, str] = {
    YesNo.YES: "Sim",
    YesNo.NO: "Não",
}

CONDITION_LABELS: dict[Condition, str] = {
    Condition.GOOD: "Bom",
    Condition.NEEDS_RENOVATION: "A precisar de obras",
}

LAYOUT_OPTIONS: dict[str, str] = {
    "T0": "Estúdio sem quartos",
    "T1": "Um quarto",
    "T2": "Dois quartos",
    "T3": "Três quartos",
    "T4+": "Quatro ou mais quartos",
}

ENERGY_CLASSES: tuple[str, ...] = ("A+", "A", "B", "C", "D", "E")

# Fields cleared when a higher location level changes
LOCATION_CASCADE: dict[str, tuple[str, ...]] = {
    "region": ("sub_region", "local_area"),
    "sub_region": ("local_area",),
}


class AnswerSet(BaseModel):
    """All attributes collected from the user.

    Empty strings and ``None`` mean "not answered yet".
    """

    # Property
    kind: PropertyKind | None = Field(default=None, description="House or apartment")
    living_area: str = Field(default="", description="Living area in m² (raw input)")
    plot_area: str = Field(default="", description="Total/plot area in m² (houses)")
    floor: str = Field(default="", description="Floor number (apartments)")
    layout: str = Field(default="", description="Layout code T0..T4+")
    construction_year: str = Field(default="", description="Construction year (raw input)")
    condition: Condition | None = Field(default=None, description="Conservation state")
    energy_class: str = Field(default="", description="Energy certificate class")

    # Amenities
    elevator: YesNo | None = None
    balcony: YesNo | None = None
    garage: YesNo | None = None
    pool: YesNo | None = None
    garden: YesNo | None = None

    # Location
    address: str = Field(default="", description="Street address (optional)")
    region: str = Field(default="", description="District")
    sub_region: str = Field(default="", description="Municipality, used for price lookup")
    local_area: str = Field(default="", description="Parish")

    # Contact
    phone: str = ""
    accepts_contact: bool = False
    wants_professional_evaluation: bool = False

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }

    @field_validator("energy_class")
    @classmethod
    def normalize_energy_class(cls, v: str) -> str:
        """Energy class is compared case-insensitively."""
        return v.strip().upper()

    @field_validator("layout")
    @classmethod
    def normalize_layout(cls, v: str) -> str:
        """Layout codes are stored uppercase (t2 -> T2)."""
        return v.strip().upper()

    def with_changes(self, **changes: Any) -> AnswerSet:
        """Return a new snapshot with ``changes`` applied.

        Setting a location level always clears the levels below it, unless the
        same call also provides them.
        """
        updates = dict(changes)
        for parent, children in LOCATION_CASCADE.items():
            if parent in updates:
                for child in children:
                    updates.setdefault(child, "")
        # Route through validation so enum/str normalization applies
        data = self.model_dump()
        data.update(updates)
        return AnswerSet.model_validate(data)
