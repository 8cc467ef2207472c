[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cdkpw"
version = "0.1.0"
description = "Wrapper for the AWS CDK command line that picks an AWS profile from the stack name"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["aws", "cdk", "profile", "wrapper", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cdkpw = "cdkpw.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cdkpw"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
