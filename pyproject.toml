[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kuttl"
version = "0.1.0"
description = "Building blocks for declarative Kubernetes test suites: env expansion, test files, an HTTP fetcher, JUnit-style reports and log collectors"
requires-python = ">=3.10"
dependencies = []
keywords = ["kubernetes", "testing", "junit", "report", "kubectl", "test-harness"]
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
    "Topic :: Software Development :: Testing",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kubectl-kuttl = "kuttl.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kuttl"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
