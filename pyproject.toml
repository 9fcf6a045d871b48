[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "make_karabiner"
version = "0.1.0"
description = "Generate Karabiner-Elements complex modification rules from a JIS-based key mapping table"
requires-python = ">=3.10"
dependencies = []
keywords = ["karabiner", "keyboard", "layout", "jis", "remapping"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
make-karabiner = "make_karabiner.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["make_karabiner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
