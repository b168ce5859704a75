"""Pydantic schemas for configured asset definitions."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..assets.script import ScriptLocation
from ..errors import InvalidAssetDefinitionError

REQUIRED_KEYS = ("type", "handle", "name")

STYLE_TYPE = "style"


class TranslationDefinition(BaseModel):
    """Binding between a localization domain and a catalog path."""

    model_config = ConfigDict(extra="ignore")

    domain: str = Field(..., description="Localization domain")
    path: str = Field(default="", description="Catalog path relative to the root")

    @field_validator("path", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def relative_path(self) -> str:
        return self.path.lstrip("/")


class AssetDefinition(BaseModel):
    """Fields shared by script and style definitions."""

    model_config = ConfigDict(
        extra="ignore", populate_by_name=True, coerce_numbers_to_str=True
    )

    type: Any
    handle: str
    name: str
    preload: bool = False

    @field_validator("preload", mode="before")
    @classmethod
    def _coerce_preload(cls, value: Any) -> bool:
        return bool(value)


class StyleDefinition(AssetDefinition):
    """Stylesheet definition."""

    media_type: str | None = Field(default=None, alias="mediaType")


class ScriptDefinition(AssetDefinition):
    """Script definition."""

    target_location: ScriptLocation | None = Field(
        default=None, alias="targetLocation"
    )
    translations: list[TranslationDefinition] | None = None


def validate_asset_definition(definition: Any) -> None:
    """Ensure a raw definition carries every required key.

    Raises:
        InvalidAssetDefinitionError: If the definition is not a mapping or
            lacks any of ``type``, ``handle`` and ``name``.
    """
    if not isinstance(definition, Mapping):
        raise InvalidAssetDefinitionError()
    if any(key not in definition for key in REQUIRED_KEYS):
        raise InvalidAssetDefinitionError()


def parse_asset_definition(
    definition: Mapping[str, Any],
) -> StyleDefinition | ScriptDefinition:
    """Decode a raw definition into its typed form.

    Anything whose ``type`` is not exactly ``"style"`` is decoded as a script.
    """
    validate_asset_definition(definition)

    model: type[StyleDefinition] | type[ScriptDefinition] = (
        StyleDefinition if definition["type"] == STYLE_TYPE else ScriptDefinition
    )

    try:
        return model.model_validate(dict(definition))
    except ValidationError as exc:
        raise InvalidAssetDefinitionError(
            f"Invalid asset definition {definition.get('handle')!r}: "
            f"{exc.error_count()} validation error(s): "
            + "; ".join(
                f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            )
        ) from exc
