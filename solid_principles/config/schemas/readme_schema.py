"""README configuration schema."""

from pydantic import BaseModel, Field, field_validator


class ReadmeConfig(BaseModel):
    """Where the README lives and which fenced blocks it checks."""

    path: str = Field("README.md", description="README file path")
    language: str = Field("python", description="Info string of checked code blocks")
    template: str = Field("README.md.j2", description="Packaged template name")

    @field_validator("path", "language", "template")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("README settings cannot be empty")
        return v
