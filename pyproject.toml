[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fuelup"
version = "0.27.3"
description = "Manage the Fuel toolchain with ease"
requires-python = ">=3.10"
keywords = ["fuel", "toolchain", "forc", "sway", "version-manager"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Operating System :: MacOS",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]
dependencies = [
    "semver>=3",
    "tomlkit>=0.11",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[tool.hatch.build.targets.wheel]
packages = ["fuelup"]

[tool.hatch.build.targets.sdist]
include = ["fuelup", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
