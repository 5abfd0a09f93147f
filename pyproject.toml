[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zhconvert"
version = "0.1.0"
description = "Dictionary-driven conversion between Chinese character variants, with phrase extraction"
requires-python = ">=3.10"
dependencies = []
keywords = ["chinese", "simplified", "traditional", "conversion", "segmentation", "dictionary"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Chinese (Simplified)",
    "Natural Language :: Chinese (Traditional)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zhconvert"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
