"""Builders that lay out Terraform project skeletons on disk."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Union

PathLike = Union[str, Path]

MODULE_FILES = ("main.tf", "variables.tf", "versions.tf", "outputs.tf")
ROOT_FILES = ("variables.tf", "outputs.tf")

_VERSIONS_TEMPLATE = (
    "terraform {\n"
    "  required_providers {}\n"
    "  }\n"
    "}\n"
)


def _module_source_text(module_name: str, module_path: str) -> str:
    return (
        f'module "{module_name}" {{\n'
        f'  source = "{module_path}"\n'
        "}\n"
    )


def _write_new(path: PathLike, text: str) -> None:
    """Write ``text`` to ``path`` unless the file already exists."""
    try:
        with open(path, "x", encoding="utf-8") as handle:
            handle.write(text)
    except FileExistsError:
        pass


def touch_file(path: PathLike) -> None:
    """Create an empty file, leaving an existing one untouched."""
    _write_new(path, "")


def write_module_source(path: PathLike, module_name: str, module_path: str) -> None:
    """Write a module block sourcing ``module_path``, unless the file exists."""
    _write_new(path, _module_source_text(module_name, module_path))


def write_versions(path: PathLike) -> None:
    """Write the versions.tf boilerplate, unless the file exists."""
    _write_new(path, _VERSIONS_TEMPLATE)


def module_boilerplate(path: PathLike) -> None:
    """Create the standard module files in directory ``path``."""
    directory = Path(path)
    for name in MODULE_FILES:
        if name == "versions.tf":
            write_versions(directory / name)
        else:
            touch_file(directory / name)


def root_boilerplate(path: PathLike) -> None:
    """Create the files a root configuration calling modules needs."""
    directory = Path(path)
    for name in ROOT_FILES:
        touch_file(directory / name)


def _create_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


@dataclass
class Project(abc.ABC):
    """A project style that knows how to describe and build itself."""

    name: str = ""
    description: str = ""

    def describe(self) -> str:
        """Return the text describing this project style and its layout."""
        heading = f"[{self.name}]" if self.name else ""
        if heading and heading not in self.description:
            return self.description
        return self.description

    @abc.abstractmethod
    def build(
        self, tf_dir: PathLike, modules: Iterable[str], envs: Iterable[str]
    ) -> None:
        """Create the project layout under ``tf_dir``."""


@dataclass
class Stack(Project):
    """Each environment refers to every module through one .tf file."""

    def build(
        self, tf_dir: PathLike, modules: Iterable[str], envs: Iterable[str]
    ) -> None:
        root = Path(tf_dir)
        envs = list(envs)
        for module_name in modules:
            module_dir = root / "modules" / module_name
            _create_dir(module_dir)
            module_boilerplate(module_dir)

            if envs:
                for env_name in envs:
                    env_dir = root / "envs" / env_name
                    _create_dir(env_dir)
                    write_module_source(
                        env_dir / f"{module_name}.tf",
                        module_name,
                        f"../../modules/{module_name}",
                    )
                    root_boilerplate(env_dir)
            else:
                write_module_source(
                    root / f"{module_name}.tf",
                    module_name,
                    f"modules/{module_name}",
                )
                root_boilerplate(root)


@dataclass
class Layered(Project):
    """Each module gets its own root directory in every environment."""

    def build(
        self, tf_dir: PathLike, modules: Iterable[str], envs: Iterable[str]
    ) -> None:
        root = Path(tf_dir)
        envs = list(envs)
        for module_name in modules:
            module_dir = root / "modules" / module_name
            _create_dir(module_dir)
            module_boilerplate(module_dir)

            if envs:
                for env_name in envs:
                    env_dir = root / "envs" / env_name / module_name
                    _create_dir(env_dir)
                    write_module_source(
                        env_dir / "main.tf",
                        module_name,
                        f"../../../modules/{module_name}",
                    )
                    root_boilerplate(env_dir)
            else:
                layer_dir = root / module_name
                _create_dir(layer_dir)
                write_module_source(
                    layer_dir / "main.tf",
                    module_name,
                    f"../modules/{module_name}",
                )
                root_boilerplate(layer_dir)