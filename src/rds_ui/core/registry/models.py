"""Pydantic models for the registry index.json manifest."""

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from rds_ui.core.errors import RegistryError

LIB_PREFIX = "lib/"


def is_lib_key(key: str) -> bool:
    """Return True for registry keys that name a shared lib entry (lib/utils)."""
    return key.startswith(LIB_PREFIX)


def lib_name(key: str) -> str:
    """Strip the lib/ prefix: "lib/utils" becomes "utils"."""
    return key[len(LIB_PREFIX) :] if is_lib_key(key) else key


class FileBundle(BaseModel):
    """A set of files plus the npm packages they need (lib and styles entries)."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    files: list[str] = Field(default_factory=list)
    dependencies: list[str] = Field(default_factory=list)


class ComponentEntry(BaseModel):
    """An installable component.

    `name` doubles as the folder the files are written into. Registry
    dependencies are keys into `components`, or `lib/`-prefixed keys into `lib`.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    name: str = Field(..., min_length=1)
    files: list[str] = Field(default_factory=list)
    dependencies: list[str] = Field(default_factory=list)
    registry_dependencies: list[str] = Field(
        default_factory=list, alias="registryDependencies"
    )


class RegistryIndex(BaseModel):
    """Top-level registry manifest. Immutable once fetched."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    name: str = ""
    base_url: str = Field(default="", alias="baseUrl")
    lib: dict[str, FileBundle] = Field(default_factory=dict)
    styles: FileBundle = Field(default_factory=FileBundle)
    components: dict[str, ComponentEntry] = Field(default_factory=dict)

    def component_keys(self) -> list[str]:
        return list(self.components)


def parse_registry_index(raw: str, origin: str) -> RegistryIndex:
    """Validate index.json text into a RegistryIndex.

    Raises:
        RegistryError: If the text is not JSON or does not match the schema
    """
    try:
        return RegistryIndex.model_validate_json(raw)
    except ValidationError as e:
        raise RegistryError(f"Invalid registry index at {origin}:\n{e}") from e
