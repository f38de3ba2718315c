[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sarc"
version = "0.1.0"
description = "JSON HTTP service for scheduling rooms, lectures and resource reservations in an academic setting"
requires-python = ">=3.10"
keywords = [
    "scheduling",
    "reservations",
    "rooms",
    "lectures",
    "curriculum",
    "rest",
    "flask",
    "sqlite",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
    "Topic :: Office/Business :: Scheduling",
]
dependencies = [
    "flask",
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sarc = "sarc.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sarc"]

[tool.hatch.build.targets.sdist]
include = ["sarc", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
