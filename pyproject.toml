[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphdrills"
version = "0.1.0"
description = "Breadth-first and depth-first search drills on grids, graphs and binary trees, plus two small interactive console exercises."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bfs",
    "dfs",
    "graph",
    "grid",
    "binary tree",
    "algorithms",
    "exercises",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphdrills-inventory = "graphdrills.inventory:main"
graphdrills-students = "graphdrills.students:main"

[tool.hatch.build.targets.wheel]
packages = ["graphdrills"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
