[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bakerysim"
version = "0.1.0"
description = "A threaded bakery simulation with chefs, bakers, sellers, customers, a supply chain, a manager and a text dashboard"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "bakery", "threads", "semaphores"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bakerysim = "bakerysim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bakerysim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
