[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "imapfault"
version = "0.1.0"
description = "Exception hierarchy for an IMAP client: BAD/NO/BYE server responses, I/O and parse failures, and argument validation."
requires-python = ">=3.10"
dependencies = []
keywords = ["imap", "email", "errors", "exceptions"]
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
    "Topic :: Communications :: Email :: Post-Office :: IMAP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["imapfault"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
