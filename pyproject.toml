[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "securerecords"
version = "0.1.0"
description = "Toy in-memory record store with small-curve ECDSA signatures, LEA in OFB mode and a McEliece-style key pair"
requires-python = ">=3.10"
dependencies = []
keywords = ["ecdsa", "lea", "mceliece", "ofb", "cryptography", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
securerecords = "securerecords.app:main"

[tool.hatch.build.targets.wheel]
packages = ["securerecords"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
