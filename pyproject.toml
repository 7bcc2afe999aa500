[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "organized"
version = "0.1.0"
description = "Keep an inventory of workshop parts: add, delete, sort and list actuators, devices, processors, sensors and wires."
requires-python = ">=3.10"
dependencies = []
keywords = ["inventory", "workshop", "sorting", "parts"]
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
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["organized"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
