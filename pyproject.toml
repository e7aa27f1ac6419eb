[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shockmap"
version = "0.1.0"
description = "Controller mapping core: key names, chorded settings, value parsing, virtual pad reports and gyro maths"
requires-python = ">=3.10"
dependencies = []
keywords = ["gamepad", "controller", "gyro", "mapping", "ds4", "xbox"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["shockmap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
