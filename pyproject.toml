[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chromakit"
version = "0.1.0"
description = "Toolkit-independent colour models: colour parsing, GIMP palettes, palette collections, gradient stops and 2D colour sliders"
requires-python = ">=3.10"
dependencies = []
keywords = ["color", "palette", "gimp", "gradient", "hsv", "hsl", "color-picker"]
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
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chromakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
