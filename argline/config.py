# Argline CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for Argline commands.

A config file is YAML or TOML of the shape

    title: "My tools"
    commands:
      - name: greet
        description: Say hello
        exec: my_module.greet
        params:
          - name: who
          - name: times
            type: {name: number, min: 1}
            default_value: 1
          - name: colour
            type: {name: selection, data: my_module.list_colours}

`exec` is a dotted import path. Inside a type declaration, `data` and `defer`
may also be dotted paths to callables.
"""
from __future__ import annotations

import importlib
import sys
from pathlib import Path
from typing import Any, Callable

import toml
import yaml
from pydantic import BaseModel, Field, field_validator

from argline.command_registry import CommandRegistry
from argline.console import console
from argline.logger import logger
from argline.themes import OneColors
from argline.types.registry import TypeRegistry

IMPORTABLE_TYPE_OPTIONS = ("data", "defer")


def import_exec(dotted_path: str) -> Any:
    """Dynamically imports a callable from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        console.print(f"[{OneColors.DARK_RED}]❌ Invalid import path:[/] {dotted_path}")
        sys.exit(1)
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        console.print(
            f"[{OneColors.DARK_RED}]❌ Could not import '{dotted_path}': {error}[/]\n"
            f"[{OneColors.COMMENT_GREY}]Ensure the module is installed and discoverable "
            "via PYTHONPATH."
        )
        sys.exit(1)
    try:
        target = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        console.print(
            f"[{OneColors.DARK_RED}]❌ Module '{module_path}' has no attribute "
            f"'{attr}': {error}[/]"
        )
        sys.exit(1)
    return target


class RawParameter(BaseModel):
    """A parameter as written in a config file."""

    name: str
    type: str | dict[str, Any] = "text"
    description: str = ""
    default_value: Any = None
    has_default: bool = False

    @field_validator("type")
    @classmethod
    def resolve_type_imports(cls, value: str | dict[str, Any]) -> str | dict[str, Any]:
        if isinstance(value, str):
            return value
        resolved = dict(value)
        for option in IMPORTABLE_TYPE_OPTIONS:
            if isinstance(resolved.get(option), str):
                resolved[option] = import_exec(resolved[option])
        return resolved

    @classmethod
    def from_entry(cls, entry: dict[str, Any]) -> RawParameter:
        entry = dict(entry)
        for key in ("default_value", "defaultValue", "default"):
            if key in entry:
                entry["default_value"] = entry.pop(key)
                entry["has_default"] = True
                break
        return cls(**entry)

    def to_spec(self) -> dict[str, Any]:
        spec: dict[str, Any] = {
            "name": self.name,
            "type": self.type,
            "description": self.description,
        }
        if self.has_default:
            spec["default_value"] = self.default_value
        return spec


class RawCommand(BaseModel):
    """A command as written in a config file."""

    name: str
    description: str = ""
    exec: str | None = None
    params: list[dict[str, Any]] = Field(default_factory=list)

    def to_spec(self) -> dict[str, Any]:
        exec_: Callable[..., Any] | None = None
        if self.exec is not None:
            exec_ = import_exec(self.exec)
        return {
            "name": self.name,
            "description": self.description,
            "exec": exec_,
            "params": [RawParameter.from_entry(param).to_spec() for param in self.params],
        }


class ArglineConfig(BaseModel):
    """Argline configuration model."""

    title: str = "Argline"
    prompt: str = "argline > "
    commands: list[RawCommand] = Field(default_factory=list)

    def to_registry(self, types: TypeRegistry | None = None) -> CommandRegistry:
        registry = CommandRegistry(types)
        for command in self.commands:
            registry.add_command(command.to_spec())
        return registry


def read_config(file_path: Path | str) -> ArglineConfig:
    """
    Read an Argline configuration from a YAML or TOML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported or the content is not a
            mapping with a list of commands.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict) or not isinstance(raw_config.get("commands"), list):
        raise ValueError(
            "Configuration file must contain a dictionary with a list of commands.\n"
            "Example:\n"
            "commands:\n"
            "  - name: 'greet'\n"
            "    description: 'Example command'\n"
            "    exec: 'my_module.greet'"
        )

    logger.debug("Loaded config from %s", path)
    return ArglineConfig(**raw_config)


def loader(file_path: Path | str, types: TypeRegistry | None = None) -> CommandRegistry:
    """
    Load Argline commands from a YAML or TOML file into a new CommandRegistry.

    Args:
        file_path (str | Path): Path to the config file.
        types (TypeRegistry | None): Type registry for the commands' parameters.

    Returns:
        CommandRegistry: A registry holding every command in the file.
    """
    return read_config(file_path).to_registry(types)
