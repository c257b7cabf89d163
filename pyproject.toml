[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sqlast"
version = "0.1.0"
description = "SQL operator types with their SQL spellings"
requires-python = ">=3.10"
dependencies = []
keywords = ["sql", "ast", "operators", "postgresql"]
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
    "Topic :: Database",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sqlast"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
