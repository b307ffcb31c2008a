[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uniword"
version = "0.2.2"
description = "Find Unicode characters by keywords from their names"
requires-python = ">=3.10"
dependencies = []
keywords = ["unicode", "characters", "search", "keywords", "code points"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
uniword = "uniword.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["uniword"]

[tool.pytest.ini_options]
addopts = "-ra"
