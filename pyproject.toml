[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "d3util"
version = "1.0.0"
description = "Server utilities: debug logging, string and file helpers, hashing and AES, and an audit log"
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = ["utilities", "audit", "logging", "crypto", "aes", "hashing"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["d3util"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
