[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nacossdk"
version = "0.1.0"
description = "Client-side building blocks for a service discovery and configuration registry: models, request parameters, UUIDs, request signing and TLS settings"
requires-python = ">=3.10"
dependencies = []
keywords = ["service-discovery", "configuration", "registry", "naming", "uuid", "signature"]
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
    "Topic :: System :: Distributed Computing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nacossdk"]

[tool.pytest.ini_options]
addopts = "-ra"
