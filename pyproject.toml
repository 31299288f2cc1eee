[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pgsched"
version = "0.1.0"
description = "Pod group helpers for gang scheduling: group labels, wait timeouts and two-way merge patches."
requires-python = ">=3.10"
dependencies = []
keywords = ["scheduling", "coscheduling", "pod-group", "gang-scheduling", "merge-patch"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Clustering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pgsched"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
