[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexkit"
version = "0.1.0"
description = "Hexagonal grid directions, angles and coordinate conversions"
requires-python = ">=3.10"
dependencies = []
keywords = ["hexagon", "hex grid", "axial coordinates", "directions", "game development"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hexkit"]

[tool.pytest.ini_options]
addopts = "-ra"
