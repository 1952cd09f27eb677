[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enigmaar"
version = "0.1.0"
description = "Reference data, request and response models and validating services for astrological research calculations."
requires-python = ">=3.10"
dependencies = []
keywords = ["astrology", "astronomy", "charts", "midpoints", "harmonics", "aspects", "research"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Astronomy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["enigmaar"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
