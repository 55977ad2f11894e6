[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "whocares"
version = "0.1.0"
description = "A tongue-in-cheek web page counting how many people did not ask, with generated Open Graph images"
requires-python = ">=3.10"
keywords = ["flask", "open-graph", "counter", "humor", "web"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]
dependencies = [
    "flask",
    "pillow",
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
whocares = "whocares.web:main"

[tool.hatch.build.targets.wheel]
packages = ["whocares"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
