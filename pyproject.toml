[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sjistext"
version = "0.1.0"
description = "Decode Shift-JIS bytes to Unicode code points and UTF-8, using a fixed lookup table."
requires-python = ">=3.10"
dependencies = []
keywords = ["shift-jis", "sjis", "japanese", "unicode", "utf-8", "text-encoding"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Japanese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sjistext"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
