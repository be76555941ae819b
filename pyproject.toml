[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lyrickit"
version = "2.2.5"
description = "Helpers for making scrolling lyrics: text trimming, URL encoding, encoding-aware file reading, file splitting, HTTP requests and song downloads."
requires-python = ">=3.10"
dependencies = []
keywords = ["lyrics", "lrc", "music", "download", "url-encoding", "file-split", "encoding-detection"]
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
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lyrickit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
