[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chunkwork"
version = "0.1.0"
description = "Small chunked jobs: prime counting, summation, Caesar cipher and maximum search split across a pool of workers"
requires-python = ">=3.10"
dependencies = []
keywords = ["parallel", "chunking", "primes", "caesar", "thread pool"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Topic :: System :: Distributed Computing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chunkwork-hello = "chunkwork.pool:main"
chunkwork-primes = "chunkwork.primes:main"
chunkwork-gauss = "chunkwork.gauss:main"
chunkwork-cipher = "chunkwork.cipher:main"
chunkwork-max = "chunkwork.maximum:main"

[tool.hatch.build.targets.wheel]
packages = ["chunkwork"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
