# Argtree CLI Resolver — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loads a command tree from a YAML or TOML file."""
from __future__ import annotations

import importlib
from datetime import datetime
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from argtree.command import CommandNode
from argtree.exceptions import ArgtreeError, ConfigLoadError
from argtree.logger import logger
from argtree.option import MISSING, OptionSpec

MAX_DEPTH = 16

TYPE_NAMES: dict[str, type] = {
    "str": str,
    "string": str,
    "bool": bool,
    "flag": bool,
    "int": int,
    "float": float,
    "path": Path,
    "datetime": datetime,
}


def import_object(dotted_path: str) -> Any:
    """Dynamically imports an object from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise ConfigLoadError(f"Invalid import path: '{dotted_path}'")
    try:
        module = importlib.import_module(module_path)
    except ImportError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise ConfigLoadError(
            f"Could not import '{dotted_path}': {error}. Ensure the module is "
            "installed and discoverable via PYTHONPATH."
        ) from error
    try:
        return getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise ConfigLoadError(
            f"Module '{module_path}' has no attribute '{attr}'"
        ) from error


def resolve_type(type_name: str) -> Any:
    """Map a config type name (or dotted import path) to a Python type."""
    if type_name in TYPE_NAMES:
        return TYPE_NAMES[type_name]
    return import_object(type_name)


def import_callable(dotted_path: str | None) -> Any:
    if dotted_path is None:
        return None
    obj = import_object(dotted_path)
    if not callable(obj):
        raise ConfigLoadError(f"'{dotted_path}' is not callable")
    return obj


class RawOption(BaseModel):
    """Raw option model for argtree configuration."""

    name: str
    type: str = "str"
    help: str = ""
    required: bool = False
    default: Any = None
    default_factory: str | None = None
    parser: str | None = None

    def to_spec(self) -> OptionSpec:
        default = self.default if "default" in self.model_fields_set else MISSING
        return OptionSpec(
            name=self.name,
            type=resolve_type(self.type),
            help=self.help,
            required=self.required,
            default=default,
            default_factory=import_callable(self.default_factory),
            parser=import_callable(self.parser),
        )


class RawCommand(BaseModel):
    """Raw command model for argtree configuration."""

    name: str
    help: str = ""
    build: str | None = None
    options: list[RawOption] = Field(default_factory=list)
    commands: list[RawCommand] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be empty")
        return value

    def to_node(self, _depth: int = 0) -> CommandNode:
        if _depth > MAX_DEPTH:
            raise ConfigLoadError(
                f"Maximum command depth exceeded ({MAX_DEPTH} levels deep)"
            )
        return CommandNode(
            name=self.name,
            help=self.help,
            options=tuple(option.to_spec() for option in self.options),
            children=tuple(command.to_node(_depth + 1) for command in self.commands),
            build=import_callable(self.build),
        )


def loader(file_path: Path | str) -> CommandNode:
    """
    Load a command tree from a YAML or TOML file.

    The file describes the root command: its `name`, `help`, `options` and nested
    `commands`. Each option needs at least a `name`; `type`, `help`, `required`,
    `default`, `default_factory` and `parser` are optional. `parser`,
    `default_factory` and `build` are dotted import paths.

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).

    Returns:
        CommandNode: The root of the loaded tree.

    Raises:
        ConfigLoadError: If the file is missing, has an unsupported format, cannot
            be parsed, or describes an invalid tree.
    """
    if not isinstance(file_path, (str, Path)):
        raise TypeError("file_path must be a string or Path object.")
    path = Path(file_path)

    if not path.is_file():
        raise ConfigLoadError(f"No such config file: {file_path}")

    suffix = path.suffix
    try:
        with path.open("r", encoding="UTF-8") as config_file:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigLoadError(f"Unsupported config format: {suffix}")
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        logger.error("Failed to parse config file '%s': %s", path, error)
        raise ConfigLoadError(f"Could not parse {path}: {error}") from error

    if not isinstance(raw_config, dict):
        raise ConfigLoadError(
            "Configuration file must contain a command mapping.\n"
            "Example:\n"
            "name: 'tool'\n"
            "options:\n"
            "  - name: '--verbose'\n"
            "    type: 'bool'"
        )

    try:
        root = RawCommand.model_validate(raw_config).to_node()
    except ValidationError as error:
        raise ConfigLoadError(f"Invalid command tree in {path}:\n{error}") from error
    except ConfigLoadError:
        raise
    except ArgtreeError as error:
        raise ConfigLoadError(f"Invalid command tree in {path}: {error}") from error

    logger.debug("Loaded command tree '%s' from %s", root.name, path)
    return root


RawCommand.model_rebuild()
