[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "borkit"
version = "0.1.0"
description = "Bor chain primitives: validator encoding, system calls, boundary planning, payload building and RPC helpers"
requires-python = ">=3.10"
dependencies = [
    "pycryptodome",
]
keywords = ["bor", "polygon", "blockchain", "evm", "validators", "abi", "merkle"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Internet",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["borkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
