[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aesblock"
version = "0.1.0"
description = "Table-driven AES-128 and AES-256 block encryption with zero padding, plus a hex byte-list helper"
requires-python = ">=3.10"
dependencies = []
keywords = ["aes", "aes-128", "aes-256", "block cipher", "rijndael", "cryptography"]
classifiers = [
    "Development Status :: 3 - Alpha",
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

[project.scripts]
aesblock-aes128 = "aesblock.aes128:main"
aesblock-aes256 = "aesblock.aes256:main"
aesblock-hexlist = "aesblock.hexlist:main"

[tool.hatch.build.targets.wheel]
packages = ["aesblock"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
