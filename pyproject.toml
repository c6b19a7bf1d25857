[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chainlab"
version = "0.1.0"
description = "Linked-list structures and small programs built on them: stacks, queues, playlists, a congo line, Josephus elimination and a treasure hunt."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "linked list",
    "doubly linked list",
    "stack",
    "queue",
    "josephus",
    "data structures",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chainlab-singly = "chainlab.singly:main"
chainlab-stack = "chainlab.stack:main"
chainlab-queue = "chainlab.linkedqueue:main"
chainlab-josephus = "chainlab.josephus:main"
chainlab-congo = "chainlab.congo:main"
chainlab-playlist = "chainlab.playlist:main"
chainlab-treasure = "chainlab.treasure:main"

[tool.hatch.build.targets.wheel]
packages = ["chainlab"]

[tool.pytest.ini_options]
addopts = "-ra"
