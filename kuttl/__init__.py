"""Building blocks for declarative Kubernetes test suites: environment expansion,
test files and bundles, an HTTP fetcher, JUnit-style reports, log collectors,
version information and a small command line."""

__version__ = "0.1.0"

__all__ = ["__version__"]