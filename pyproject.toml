[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "portfoliotree"
version = "0.1.0"
description = "Portfolio risk and return calculations, allocation algorithms and back-test schedules and look-back windows."
requires-python = ">=3.10"
keywords = ["portfolio", "finance", "risk", "allocation", "backtest", "investment"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
    "scipy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["portfoliotree"]

[tool.pytest.ini_options]
addopts = "-ra"
