# kuttl

Building blocks for declarative Kubernetes test suites. The package has
no third-party dependencies and provides:

- expansion of environment variables in test arguments (`kuttl.env`),
- discovery of test files and unpacking of tar/tgz test bundles (`kuttl.files`),
- a small HTTP client for fetching manifests and test bundles (`kuttl.http_client`),
- JUnit-compatible test reports in XML or JSON (`kuttl.report`),
- log collectors that turn a collector definition into a `kubectl` command line (`kuttl.collector`),
- build version information and major/minor version comparison (`kuttl.version`),
- a `kubectl-kuttl` command with a `version` sub-command (`kuttl.cli`).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
kubectl-kuttl version
kubectl-kuttl --version
kubectl-kuttl --help
```

`version` prints `KUTTL Version: ` followed by the full build information
(version, commit, build date, Python version and implementation, platform).
`--version` prints only the version string. Without a sub-command the help
text is shown. The exit status is 0 on success and 255 on a usage error.

## Library use

### Environment expansion

```python
from kuttl.env import expand, expand_with_map

expand("$HOME $$")                                   # "$$" yields a literal "$"
expand_with_map("${NAME}-suffix", {"NAME": "demo"})  # "demo-suffix"
```

Both `$NAME` and `${NAME}` are understood. Values in the map take precedence
over the process environment, and variables found in neither expand to an
empty string.

### Test files and bundles

```python
from kuttl.files import from_path, trim_ext, untar, untar_in_place

from_path("tests/e2e", "*.yaml")   # regular files in the directory matching the pattern, sorted
from_path("tests/e2e/00-pod.yaml") # a path that is not a directory is returned as is
trim_ext("bundle.tgz")             # "bundle"
untar_in_place("/tmp/bundle.tgz")  # unpacks into /tmp/bundle
```

`from_path` raises `FileNotFoundError` for a path that does not exist.
`untar_in_place` treats a `.tgz` file as gzip-compressed and anything else as
a plain tar archive; `untar(dest, stream, compressed)` does the same for an
open binary stream. Only directories and regular files are unpacked.

### Fetching over HTTP

```python
from kuttl.http_client import Client, is_url, read

is_url("https://example.com/suite.tgz")  # True
is_url("/opt/foo")                       # False

data = read("https://example.com/manifest.yaml")   # bytes of the body

client = Client()
path = client.download_file("https://example.com/suite.tgz", "/tmp/downloads")
```

Requests carry a `KUTTL/<version>` user agent. `get_bytes` (and `read`)
raise `OSError` when the status is not 200. `download` writes to a `.tmp`
file first, prints its progress on one line and then renames the file; it
raises `FileExistsError` if the target already exists.

### Reports

```python
from kuttl.report import ReportType, Testcase, Testsuites, new_failure

suites = Testsuites(name="e2e")
suite = suites.new_suite("tests/e2e")

case = Testcase(name="create-pod")
case.failure = new_failure("failed in step 1-create", [RuntimeError("pod not ready")])
suite.add_testcase(case)

path = suites.report("artifacts", "kuttl-test", ReportType.XML)
```

`add_testcase` records the case's elapsed time, sets its class name to the
last path element of the suite name and updates the suite's counts.
`report` closes the collection (elapsed times and totals), creates the
directory if needed, writes `kuttl-test.xml` or `kuttl-test.json` (any type
other than XML gives JSON) and returns the file's path. `to_xml` and
`to_json` return the document as a string. `add_property` adds name/value
properties to a suite or to the whole collection, and `set_failure` records
a failure of the harness itself.

### Log collectors

```python
from kuttl.collector import TestCollector

collector = TestCollector(selector="app=nginx")
print(collector)                    # [type==pod,label: app=nginx]
print(collector.command().command)
# kubectl logs --prefix -l app=nginx -n $NAMESPACE --all-containers --tail=10
```

A collector is a `pod` (logs), `events` or `command` collector. If no type
is set, it is a command collector when a command is given and a pod collector
otherwise. `validate()` raises `ValueError` for an invalid combination of
fields, `command()` returns `None` for an invalid collector, and `str()` of
an invalid collector reads `[collector invalid: <reason>]`. For pod logs a
tail of 0 becomes 10 with a selector and -1 (everything) otherwise.

### Versions

```python
from kuttl.version import clean, from_github_version, get, parse

print(get())                                              # the version string
parse("1.15.6").compare_major_minor(parse("1.15.0"))      # 0
from_github_version("v1.5.2").minor                       # 5
clean("v1.5.2")                                           # "1.5.2"
```

`parse` accepts a leading `v` and missing minor or patch parts, and raises
`ValueError` for text that is not a version.

## What this package does not do

There is no test runner here: the command line has no `test`, `assert` or
`errors` sub-commands, and nothing in the package connects to a Kubernetes
cluster, starts a local control plane or KIND cluster, loads test steps from
YAML or applies and checks resources. The collectors only build `kubectl`
command lines; they do not run them.