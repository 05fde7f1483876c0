[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xmukit"
version = "1.2.1"
description = "Resource converters, widget class trees, standard colormap rules and a Compound Text parser"
requires-python = ">=3.10"
dependencies = []
keywords = ["x11", "xmu", "compound-text", "converters", "colormap", "widgets"]
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
packages = ["xmukit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
