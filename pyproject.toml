[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xdrgtk"
version = "1.2"
description = "Core logic for an FM/AM tuner front-end: settings model, RDS logging, RDS Spy link, frequency scheduler, antenna pattern feed and spectral scan handling"
requires-python = ">=3.10"
dependencies = []
keywords = ["radio", "tuner", "rds", "fm", "dx", "spectral-scan"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Ham Radio",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xdrgtk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
