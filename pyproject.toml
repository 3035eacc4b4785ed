[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mergesorts"
version = "1.0.0"
description = "Four variants of merge sort over integer lists, each with a small command-line front end"
requires-python = ">=3.10"
dependencies = []
keywords = ["merge sort", "sorting", "algorithms", "in-place", "linked list"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
mergesort-splitting = "mergesorts.splitting:main"
mergesort-extra-array = "mergesorts.extra_array:main"
mergesort-in-place = "mergesorts.in_place:main"
mergesort-linked-buffer = "mergesorts.linked_buffer:main"

[tool.hatch.build.targets.wheel]
packages = ["mergesorts"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
