[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wewe"
version = "0.1.0"
description = "PIN authentication for PAM-style login flows, limited to trusted networks identified by gateway MAC address"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
    "pynacl",
]
keywords = ["pam", "authentication", "pin", "argon2", "trusted-network"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
    "Topic :: System :: Systems Administration :: Authentication/Directory",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["wewe"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
