[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tdalib"
version = "0.1.0"
description = "Classic abstract data types: rationals, sorted real sets, historic dates, chronologies, max-stacks, dictionaries and phone books"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "abstract data types",
    "data structures",
    "rational",
    "set",
    "stack",
    "dictionary",
    "chronology",
    "phone book",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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

[project.scripts]
tdalib-rational = "tdalib.rational:main"
tdalib-real-set = "tdalib.real_set:main"
tdalib-historic-date = "tdalib.historic_date:main"
tdalib-chronology = "tdalib.chronology:main"
tdalib-max-stack = "tdalib.max_stack:main"
tdalib-dictionary = "tdalib.dictionary:main"
tdalib-phonebook = "tdalib.phonebook:main"

[tool.hatch.build.targets.wheel]
packages = ["tdalib"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
