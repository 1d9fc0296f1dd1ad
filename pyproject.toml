[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "productapi"
version = "1.0.0"
description = "A small JSON HTTP API for managing products, backed by an in-memory store"
requires-python = ">=3.10"
dependencies = [
    "flask",
]
keywords = ["rest", "api", "flask", "products", "crud", "in-memory"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
productapi = "productapi.server:main"

[tool.hatch.build.targets.wheel]
packages = ["productapi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
