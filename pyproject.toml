[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "engramweb"
version = "0.1.0"
description = "Link safety, observation list helpers and an installer state model for an engram memory browser."
requires-python = ">=3.10"
dependencies = []
keywords = ["engram", "observations", "memory", "redirect", "installer", "semver"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["engramweb"]

[tool.hatch.build.targets.sdist]
include = ["engramweb", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]
