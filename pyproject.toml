[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pgpkit"
version = "0.1.0"
description = "OpenPGP algorithm profiles, configuration objects and byte-stream adapters"
requires-python = ">=3.10"
dependencies = []
keywords = ["openpgp", "pgp", "profile", "streams", "cryptography"]
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
    "Topic :: Security :: Cryptography",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pgpkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
