[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "distcalc"
version = "0.1.0"
description = "A shared 8-bit calculator served over TCP, with a client that replays operations from a file"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "tcp", "client", "server", "protocol"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
distcalc-server = "distcalc.server:main"
distcalc-client = "distcalc.client:main"

[tool.hatch.build.targets.wheel]
packages = ["distcalc"]

[tool.pytest.ini_options]
addopts = "-ra"
