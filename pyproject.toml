[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tfproj"
version = "0.1.0"
description = "Scaffold Terraform project layouts (stack or layered) with module and environment boilerplate"
requires-python = ">=3.10"
dependencies = []
keywords = ["terraform", "scaffolding", "boilerplate", "infrastructure-as-code", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tfproj = "tfproj.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tfproj"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
