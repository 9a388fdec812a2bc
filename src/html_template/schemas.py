"""Pydantic schemas for runtime validation of injection inputs."""

from __future__ import annotations

from pathlib import Path

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    field_validator,
    model_validator,
)

from html_template.errors import INVALID_ARGS_ERROR


def _blank_to_none(value: object) -> object:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class InjectionConfig(BaseModel):
    """Validated template injection options."""

    model_config = ConfigDict(extra="forbid")

    template: Path | None = None
    target: Path | None = None
    prefix: str = ""
    attrs: tuple[str, ...] = ()
    embed_content: bool = False
    replace_vars: dict[str, str] | None = None

    @field_validator("template", "target", mode="before")
    @classmethod
    def _normalize_paths(cls, value: object) -> object:
        return _blank_to_none(value)

    @field_validator("prefix", mode="before")
    @classmethod
    def _normalize_prefix(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("attrs", mode="before")
    @classmethod
    def _normalize_attrs(cls, value: object) -> object:
        return () if value is None else value

    @model_validator(mode="after")
    def _require_template_or_target(self) -> InjectionConfig:
        if self.template is None and self.target is None:
            raise ValueError(INVALID_ARGS_ERROR)
        return self


class BuildOutputConfig(BaseModel):
    """Bundler output settings; exactly one of ``dir``/``file`` is expected."""

    model_config = ConfigDict(extra="ignore", from_attributes=True)

    dir: Path | None = None
    file: Path | None = None

    @field_validator("dir", "file", mode="before")
    @classmethod
    def _normalize_paths(cls, value: object) -> object:
        return _blank_to_none(value)

    @model_validator(mode="after")
    def _require_dir_or_file(self) -> BuildOutputConfig:
        if self.dir is None and self.file is None:
            raise ValueError("Build output must define either 'dir' or 'file'.")
        return self

    @property
    def output_dir(self) -> Path:
        """Directory the bundler wrote its files into."""
        if self.dir is not None:
            return self.dir
        assert self.file is not None
        return self.file.parent


class ManifestEntry(BaseModel):
    """Validated metadata for one emitted bundle file."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    file_name: str
    is_entry: StrictBool = Field(
        default=False,
        validation_alias=AliasChoices("is_entry", "isEntry"),
    )
