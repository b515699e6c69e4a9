[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "superdevs"
version = "0.1.0"
description = "HTTP server that generates ed25519 keypairs, signs and verifies messages, and builds Solana system and token instructions"
requires-python = ">=3.10"
keywords = ["solana", "http", "server", "ed25519", "spl-token", "instructions", "base58"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask>=2.2",
    "pynacl>=1.5",
    "python-dotenv>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
superdevs = "superdevs.app:main"

[tool.hatch.build.targets.wheel]
packages = ["superdevs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
