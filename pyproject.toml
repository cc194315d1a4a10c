[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpubench"
version = "0.1.0"
description = "Classic CPU benchmarks in pure Python: the Stanford small-program suite, Linpack and Dhrystone"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "dhrystone", "linpack", "stanford", "cpu"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cpubench = "cpubench.cli:main"
cpubench-linpack = "cpubench.linpack:main"
cpubench-dhrystone = "cpubench.dhrystone_run:main"

[tool.hatch.build.targets.wheel]
packages = ["cpubench"]

[tool.pytest.ini_options]
addopts = "-ra"
