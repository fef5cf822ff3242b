[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quillmark"
version = "2.1.2"
description = "Markdown editing behaviour over a plain text buffer: list continuation, auto-matching, indentation, focus fading and a heading outline"
requires-python = ">=3.10"
dependencies = []
keywords = ["markdown", "editor", "outline", "text", "lists"]
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
    "Topic :: Text Processing :: Markup :: Markdown",
    "Topic :: Text Editors :: Text Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quillmark"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
