[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "auctions"
version = "0.1.0"
description = "Domain model for online auctions: timed ascending (English), blind and Vickrey sealed-bid auctions."
requires-python = ">=3.10"
dependencies = []
keywords = ["auction", "bidding", "vickrey", "english-auction", "sealed-bid"]
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
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["auctions"]

[tool.pytest.ini_options]
addopts = "-ra"
