[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "softhash"
version = "0.1.0"
description = "Pure-software MD5, SHA-224, SHA-256, SHA-384 and SHA-512 hashing"
requires-python = ">=3.10"
dependencies = []
keywords = ["md5", "sha224", "sha256", "sha384", "sha512", "hash", "digest"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["softhash"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
