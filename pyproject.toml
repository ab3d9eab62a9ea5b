[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cmdide"
version = "0.1.0"
description = "A small terminal C++ editor with syntax colouring, completion, build-and-run and source tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "ide", "terminal", "c++", "obfuscator", "formatter"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Text Editors :: Integrated Development Environments (IDE)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cmdide = "cmdide.app:main"
cmdide-style = "cmdide.style:main"
cmdide-csvtrans = "cmdide.csvtrans:main"
cmdide-obfuscate = "cmdide.obfuscator:main"
cmdide-pauser = "cmdide.pauser:main"

[tool.hatch.build.targets.wheel]
packages = ["cmdide"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
