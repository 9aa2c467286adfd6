[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "boundless"
version = "0.1.0"
description = "Crowdfunding contract model: projects, community voting and milestone review on an in-memory ledger"
requires-python = ">=3.10"
dependencies = []
keywords = ["crowdfunding", "voting", "milestones", "ledger", "contract"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["boundless"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
