"""Command line entry point for generating Terraform project layouts."""

from __future__ import annotations

import argparse
import os
import re
import sys
from typing import List, Optional, Sequence, Tuple, Union

from tfproj.build import MODULE_FILES, ROOT_FILES, Layered, Project, Stack

YELLOW = "\033[33m"
RED = "\033[31m"
RESET = "\033[0m"
ERROR_STRING = RED + "\nError:" + RESET
WARNING_STRING = YELLOW + "\nWarning:" + RESET

# Styles offered in the error message for an unknown '--style' value.
STYLES = ("stack", "")

_DELIMITERS = re.compile(r"[:,; ]+")

_EXAMPLE_MODULES = ("vm", "vnet")
_EXAMPLE_ENV = "dev"
_DOC_MODULE_FILES = ("main.tf", "variables.tf", "outputs.tf", "versions.tf")
_DOC_ROOT_FILES = ("main.tf",) + ROOT_FILES

Node = Union[str, Tuple[str, list]]


class CliError(Exception):
    """Raised when the command line arguments cannot be acted upon."""


def split_delimited(value: str) -> list[str]:
    """Split ``value`` on ':', ',', ';' and spaces, dropping empty fields."""
    fields = [field for field in _DELIMITERS.split(value) if field]
    if not fields:
        raise CliError("invalid comma separated string in flag")
    return fields


def _tree_lines(children: Sequence[Node], prefix: str = "") -> List[str]:
    lines: List[str] = []
    for position, node in enumerate(children):
        last = position == len(children) - 1
        branch, extension = ("└── ", "    ") if last else ("├── ", "│   ")
        if isinstance(node, tuple):
            name, sub = node
            lines.append(f"{prefix}{branch}{name}/")
            lines.extend(_tree_lines(sub, prefix + extension))
        else:
            lines.append(f"{prefix}{branch}{node}")
    return lines


def _describe_text(title: str, prose: Sequence[str], root: str, env_nodes: list) -> str:
    assert set(_DOC_MODULE_FILES) == set(MODULE_FILES)
    modules_node = ("modules", [(m, list(_DOC_MODULE_FILES)) for m in _EXAMPLE_MODULES])
    envs_node = ("envs", [(_EXAMPLE_ENV, env_nodes)])
    body = [f"----{title}----", *prose, f"{root}/", *_tree_lines([modules_node, envs_node])]
    return "\n" + "".join(f"  {line}\n" for line in body) + "  "


def stack_description() -> str:
    """Return the description of the stack project style."""
    env_files = [f"{m}.tf" for m in _EXAMPLE_MODULES] + list(ROOT_FILES)
    prose = (
        "A project type where modules are referred to by a single .tf file.",
        "A stack based architecture with one environment called "
        f"'{_EXAMPLE_ENV}' and two",
        "modules called 'vm' and 'vnet' might look like:",
    )
    return _describe_text("Stack Project", prose, "stack", env_files)


def layered_description() -> str:
    """Return the description of the layered project style."""
    env_dirs = [(m, list(_DOC_ROOT_FILES)) for m in _EXAMPLE_MODULES]
    prose = (
        "A project where each module (like vm, vnet etc...) has an individual",
        "root directory dedicated to it, each with its own .tfstate files.",
        "A layered based architecture with one environment called "
        f"'{_EXAMPLE_ENV}' and two modules called 'vm' and 'vnet' might look like:",
    )
    return _describe_text("Layered Project", prose, "layered", env_dirs)


def make_project(style: str) -> Optional[Project]:
    """Return the project for ``style``, or None (with a warning) when it is empty."""
    key = style.lower()
    if key == "stack":
        return Stack(style, stack_description())
    if key == "layered":
        return Layered(style, layered_description())
    if key == "":
        print(WARNING_STRING + " you have not provided a value for '--style'\n")
        return None
    options = "".join(f"'{name}' " for name in STYLES if name)
    raise CliError(
        f"'{style}' is not a valid option for '--style'\nOptions are: {options}"
    )


def build_style(style, describe, tf_dir, modules, envs) -> None:
    """Describe or build the project for ``style``."""
    project = make_project(style)
    if project is None:
        raise CliError(f"unknown error occurred with style '{style}'")
    if describe:
        print(project.describe())
        return
    project.build(tf_dir, modules, envs)


def parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    """Parse command line arguments; list options are split on delimiters."""
    parser = argparse.ArgumentParser(prog="tfproj", allow_abbrev=False)
    parser.add_argument("-create", "--create", action="store_true",
                        help="Usage: --create/-create")
    parser.add_argument("-modules", "--modules", default=None,
                        help="Usage: --modules/-modules. Requires '--create' to be set")
    parser.add_argument("-envs", "--envs", default=None,
                        help="Usage: --envs/-envs. Requires '--create' to be set")
    parser.add_argument("-style", "--style", default="",
                        help="Usage: --style/-style. Requires '--modules' to be set")
    parser.add_argument("-dir", "--dir", dest="dir", default=None,
                        help="Usage: --dir/-dir. determines the location of the terraform project")
    parser.add_argument("-describe", "--describe", action="store_true",
                        help="Usage: --describe/-describe")
    args = parser.parse_args(argv)
    args.modules = split_delimited(args.modules) if args.modules is not None else []
    args.envs = split_delimited(args.envs) if args.envs is not None else []
    if args.dir is None:
        args.dir = os.getcwd()
    return args


def run(argv: Optional[Sequence[str]]) -> None:
    """Carry out the command described by ``argv``, raising CliError on misuse."""
    args = parse_args(argv)

    if args.describe:
        build_style(args.style, True, args.dir, args.modules, args.envs)
        return

    tf_dir = args.dir
    if tf_dir and tf_dir[-1] in "/\\":
        tf_dir = tf_dir[:-1]

    if (args.modules or args.envs) and not args.create:
        raise CliError("'--create' flag not specified")

    if args.style and not args.modules:
        raise CliError("'--modules' flag not specified")

    if args.modules:
        build_style(args.style, False, tf_dir, args.modules, args.envs)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command and report any error; return the exit status."""
    try:
        run(argv)
    except (CliError, OSError) as exc:
        print(f"{ERROR_STRING} {exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())