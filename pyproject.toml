[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mxlcore"
version = "0.6.0"
description = "Media exchange layer core: TAI timing, head index arithmetic, flow and grain descriptors"
requires-python = ">=3.10"
dependencies = []
keywords = ["media", "video", "audio", "flow", "grain", "tai", "nmos", "head index"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mxlcore"]

[tool.pytest.ini_options]
addopts = "-ra"
