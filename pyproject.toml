[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rsassist"
version = "0.1.0"
description = "Text helpers for Rust code-completion tooling: identifier scanning, closure detection, visibility stripping, standard library source discovery and throw-away source trees"
requires-python = ">=3.10"
dependencies = []
keywords = ["rust", "completion", "ide", "source-analysis", "editor"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Editors :: Integrated Development Environments (IDE)",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rsassist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
