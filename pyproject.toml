[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "osalgos"
version = "0.1.0"
description = "Operating-system algorithms to study and experiment with: CPU, disk and priority scheduling, page replacement, memory allocation, deadlock avoidance and mutual exclusion."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "scheduling",
    "page replacement",
    "disk scheduling",
    "bankers algorithm",
    "memory allocation",
    "mutual exclusion",
    "producer consumer",
    "red-black tree",
    "education",
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
osalgos-cpu = "osalgos.cpu_scheduling:main"
osalgos-srtf = "osalgos.shortest_remaining:main"
osalgos-priority = "osalgos.priority_scheduling:main"
osalgos-disk = "osalgos.disk_scheduling:main"
osalgos-bankers = "osalgos.bankers:main"
osalgos-pages = "osalgos.page_replacement:main"
osalgos-memory = "osalgos.memory_allocation:main"
osalgos-arith = "osalgos.arithmetic:main"
osalgos-rbtree = "osalgos.rbtree:main"
osalgos-mutex = "osalgos.mutex:main"
osalgos-buffer = "osalgos.producer_consumer:main"

[tool.hatch.build.targets.wheel]
packages = ["osalgos"]

[tool.hatch.build.targets.sdist]
include = ["osalgos", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
