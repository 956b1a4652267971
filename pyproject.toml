[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cafedesk"
version = "1.0.0"
description = "A small terminal point-of-sale desk for a coffee shop: menu editing, order taking, receipts and daily summaries."
requires-python = ">=3.10"
dependencies = []
keywords = ["cafe", "coffee", "point-of-sale", "menu", "receipt", "orders"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cafedesk = "cafedesk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cafedesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
