[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fchat"
version = "0.9.5"
description = "Core pieces of a chat client: enumerations, messages, characters, channels, chat tabs, a websocket connection and image caches"
requires-python = ">=3.10"
dependencies = [
    "websocket-client",
]
keywords = ["chat", "messenger", "websocket", "client"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["fchat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
