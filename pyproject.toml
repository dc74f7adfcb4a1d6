[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "articletags"
version = "0.1.0"
description = "Extract frequent-word tags from article bodies and keep articles with their tags in MongoDB"
requires-python = ">=3.10"
dependencies = [
    "pymongo",
]
keywords = ["tags", "keywords", "articles", "text", "mongodb", "indexing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Indexing",
    "Topic :: Database",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["articletags"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
