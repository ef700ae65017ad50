[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minobjects"
version = "0.1.0"
description = "Small processing objects: beat timers, list and signal operators, sample buffers, matrix filters and markdown helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "signal", "dsp", "timer", "matrix", "convolution", "stencil", "autolink", "markdown"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Text Processing :: Markup :: Markdown",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minobjects"]

[tool.pytest.ini_options]
addopts = "-ra"
