[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "statline"
version = "1.0.0"
description = "A status line generator for the X root window or stdout: CPU, memory, battery, network, clock and more"
requires-python = ">=3.10"
dependencies = ["psutil"]
keywords = ["status", "statusbar", "monitoring", "x11", "system-info"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
statline = "statline.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["statline"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
