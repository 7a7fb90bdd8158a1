[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mercadofinger"
version = "0.4.0"
description = "Store data structures: dates, clients, products, carts, promotions, shipping queues and complaint tables."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "binary search tree",
    "priority queue",
    "hash table",
    "bounded set",
    "promotions",
    "store",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mercadofinger"]

[tool.pytest.ini_options]
addopts = "-ra"
