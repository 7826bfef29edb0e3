[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "legiontui"
version = "0.1.0"
description = "Read sensors and toggle driver features on Lenovo Legion laptops through sysfs"
requires-python = ">=3.10"
dependencies = []
keywords = ["lenovo", "legion", "sysfs", "laptop", "sensors", "hardware"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["legiontui"]

[tool.pytest.ini_options]
addopts = "-ra"
