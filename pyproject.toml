[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "statprng"
version = "0.1.0"
description = "Small deterministic pseudo-random number generators (Marsaglia MWC, XORShift128, C99-style LCG, PCG32, SplitMix64) and a 32-bit popcount"
requires-python = ">=3.10"
dependencies = []
keywords = ["prng", "random", "pcg32", "xorshift", "splitmix64", "mwc", "popcount"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["statprng"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
