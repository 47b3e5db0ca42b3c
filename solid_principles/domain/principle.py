"""Principle and snippet models - the content of the tutorial."""
from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class PrincipleId(str, Enum):
    """The five SOLID principles, in S-O-L-I-D order."""
    SRP = "SRP"
    OCP = "OCP"
    LSP = "LSP"
    ISP = "ISP"
    DIP = "DIP"

    @classmethod
    def parse(cls, value: str) -> "PrincipleId":
        """Parse an acronym case-insensitively."""
        return cls(value.strip().upper())


class Variant(str, Enum):
    """Which half of a snippet pair."""
    BAD = "bad"
    GOOD = "good"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def marker(self) -> str:
        """First line every snippet of this variant starts with."""
        return f"# {self.label}"


class Snippet(BaseModel):
    """One half of a Bad/Good pair.

    ``classes`` are the names the prose refers to, ``abstractions`` the ones
    that must be declared as abstract base classes and ``raises`` the
    exception types the snippet is expected to raise.
    """
    model_config = ConfigDict(frozen=True)

    principle_id: PrincipleId
    variant: Variant
    module: str
    classes: List[str] = Field(default_factory=list)
    abstractions: List[str] = Field(default_factory=list)
    raises: List[str] = Field(default_factory=list)

    @field_validator("module")
    @classmethod
    def validate_module(cls, v: str) -> str:
        parts = v.split(".")
        if len(parts) < 2 or not all(part.isidentifier() for part in parts):
            raise ValueError(f"Invalid snippet module path: {v}")
        return v

    @model_validator(mode="after")
    def abstractions_are_named(self) -> "Snippet":
        unknown = [name for name in self.abstractions if name not in self.classes]
        if unknown:
            raise ValueError(f"Abstractions not listed in classes: {unknown}")
        return self

    @property
    def key(self) -> str:
        """Stable identifier such as ``OCP/bad``."""
        return f"{self.principle_id.value}/{self.variant.value}"

    @property
    def package(self) -> str:
        return self.module.rsplit(".", 1)[0]

    @property
    def filename(self) -> str:
        return self.module.rsplit(".", 1)[1] + ".py"


class Principle(BaseModel):
    """A SOLID principle with its prose and its Bad/Good snippet pair."""
    model_config = ConfigDict(frozen=True)

    id: PrincipleId
    name: str
    slug: str
    summary: str
    bad_prose: str
    good_prose: str
    bad: Snippet
    good: Snippet

    @model_validator(mode="after")
    def snippets_match_principle(self) -> "Principle":
        for variant, snippet in ((Variant.BAD, self.bad), (Variant.GOOD, self.good)):
            if snippet.principle_id != self.id:
                raise ValueError(
                    f"{variant.label} snippet belongs to {snippet.principle_id.value}, not {self.id.value}"
                )
            if snippet.variant != variant:
                raise ValueError(f"{variant.label} slot holds a {snippet.variant.value} snippet")
        return self

    def snippet(self, variant: Variant) -> Snippet:
        return self.bad if variant == Variant.BAD else self.good

    def snippets(self) -> Tuple[Snippet, Snippet]:
        return self.bad, self.good

    def to_dict(self) -> dict:
        return {
            "id": self.id.value,
            "name": self.name,
            "slug": self.slug,
            "summary": self.summary,
            "bad_module": self.bad.module,
            "good_module": self.good.module,
        }
