[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hellokit"
version = "2.8.0"
description = "Diagnostic reporting, errno fallbacks, integer overflow checks and array growth helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["errors", "diagnostics", "errno", "overflow", "integers"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hellokit"]

[tool.pytest.ini_options]
addopts = "-ra"
