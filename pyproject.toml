[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cipherlab"
version = "0.1.0"
description = "Classical cipher experiments: shift, Vigenère and mono-alphabetic substitution attacks driven by English letter frequencies."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptanalysis",
    "vigenere",
    "caesar",
    "shift cipher",
    "substitution cipher",
    "frequency analysis",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cipherlab = "cipherlab.cli:main"
cipherlab-substitution = "cipherlab.exercise01:main"
cipherlab-vigenere = "cipherlab.exercise05:main"

[tool.hatch.build.targets.wheel]
packages = ["cipherlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
