[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "avmeta"
version = "0.1.0"
description = "UPnP A/V metadata helpers: ProtocolInfo strings, LastChange events and XML utilities"
requires-python = ">=3.10"
keywords = ["upnp", "dlna", "protocolinfo", "lastchange", "didl-lite", "media"]
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
    "Topic :: Multimedia",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing :: Markup :: XML",
]
dependencies = [
    "lxml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["avmeta"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
