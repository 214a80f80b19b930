"""JUnit-compatible test reports in XML or JSON form."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Iterable

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


class ReportType(str, Enum):
    """Output format of a report."""

    XML = "xml"
    JSON = "json"


def _now() -> datetime:
    return datetime.now().astimezone()


def _as_time(moment: datetime | None) -> datetime:
    if moment is None:
        return _ZERO_TIME
    if moment.tzinfo is None:
        return moment.astimezone()
    return moment


def _format_time(moment: datetime | None) -> str:
    """Format a moment as RFC 3339 with trailing fractional zeros trimmed."""
    moment = _as_time(moment)
    text = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    if moment.microsecond:
        text += "." + f"{moment.microsecond:06d}".rstrip("0")
    offset = moment.utcoffset()
    minutes = int(offset.total_seconds() // 60) if offset else 0
    if minutes == 0:
        return text + "Z"
    sign = "+" if minutes > 0 else "-"
    hours, mins = divmod(abs(minutes), 60)
    return f"{text}{sign}{hours:02d}:{mins:02d}"


def _seconds(start: datetime | None, end: datetime) -> str:
    return f"{(end - _as_time(start)).total_seconds():.3f}"


def _base_name(path: str) -> str:
    if not path:
        return "."
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rsplit("/", 1)[-1]


@dataclass
class Property:
    """A name/value pair such as the tool version."""

    name: str
    value: str


@dataclass
class Failure:
    """A test failure: a short message and optional detailed text."""

    message: str
    text: str = ""
    type: str = ""


@dataclass
class Testcase:
    """A single test and the outcome of all of its steps."""

    __test__ = False

    name: str
    classname: str = ""
    timestamp: datetime | None = field(default_factory=_now)
    time: str = ""
    assertions: int = 0
    failure: Failure | None = None
    _end: datetime | None = field(default=None, init=False, repr=False, compare=False)


@dataclass
class Testsuite:
    """A collection of test cases and their summary."""

    __test__ = False

    name: str
    tests: int = 0
    failures: int = 0
    timestamp: datetime | None = field(default_factory=_now)
    time: str = ""
    properties: list[Property] | None = None
    testcases: list[Testcase] = field(default_factory=list)

    def add_testcase(self, testcase: Testcase) -> None:
        """Add a finished test case, updating its timing and the suite's counts."""
        testcase._end = _now()
        testcase.time = _seconds(testcase.timestamp, testcase._end)
        testcase.classname = _base_name(self.name)
        self.testcases.append(testcase)
        self.tests += 1
        if testcase.failure is not None:
            self.failures += 1

    def add_property(self, prop: Property) -> None:
        """Add a property to this suite."""
        if self.properties is None:
            self.properties = []
        self.properties.append(prop)


@dataclass
class Testsuites:
    """The whole set of suites and the rolled-up statistics."""

    __test__ = False

    name: str = ""
    tests: int = 0
    failures: int = 0
    time: str = ""
    properties: list[Property] | None = None
    testsuites: list[Testsuite] = field(default_factory=list)
    failure: Failure | None = None
    _start: datetime = field(default_factory=_now, init=False, repr=False, compare=False)

    def add_test_suite(self, testsuite: Testsuite) -> None:
        """Add a suite; its statistics are gathered on close."""
        self.testsuites.append(testsuite)

    def add_property(self, prop: Property) -> None:
        """Add a property that applies to all suites."""
        if self.properties is None:
            self.properties = []
        self.properties.append(prop)

    def close(self) -> None:
        """Compute elapsed times and total counts."""
        self.time = _seconds(self._start, _now())
        for suite in self.testsuites:
            start = _as_time(suite.timestamp)
            end = max(
                (case._end for case in suite.testcases if case._end is not None),
                default=start,
            )
            suite.time = _seconds(start, max(start, end))
            self.tests += suite.tests
            self.failures += suite.failures

    def report(self, directory: str, name: str, ftype: ReportType | str) -> str:
        """Close the report and write it to ``directory``; return the file path."""
        self.close()
        if directory and not os.path.exists(directory):
            os.makedirs(directory, 0o755)
        if ftype == ReportType.XML:
            path = os.path.join(directory, f"{name}.xml")
            content = self.to_xml()
        else:
            path = os.path.join(directory, f"{name}.json")
            content = self.to_json()
        with open(path, "w", encoding="utf-8") as out:
            out.write(content)
        return path

    def new_suite(self, name: str) -> Testsuite:
        """Create a suite, add it to the collection and return it."""
        suite = Testsuite(name=name)
        self.add_test_suite(suite)
        return suite

    def set_failure(self, message: str) -> None:
        """Record a failure of the harness itself."""
        self.failure = Failure(message=message)

    def to_xml(self) -> str:
        """Render the report as indented JUnit XML."""
        lines: list[str] = []
        _render_xml(_testsuites_element(self), 0, lines)
        return "\n".join(lines)

    def to_json(self) -> str:
        """Render the report as indented JSON."""
        text = json.dumps(_testsuites_json(self), indent=2, ensure_ascii=False)
        for raw, escaped in _JSON_ESCAPES:
            text = text.replace(raw, escaped)
        return "\n ".join(text.split("\n"))


def new_failure(message: str, errors: Iterable[Any] | None = None) -> Failure:
    """Create a failure whose text is the last of ``errors``, if any."""
    collected = list(errors or [])
    text = str(collected[-1]) if collected else ""
    return Failure(message=message, text=text)


# --- XML rendering -------------------------------------------------------

_XML_PREFIX = " "
_XML_INDENT = "  "
_XML_ESCAPES = {
    '"': "&#34;",
    "'": "&#39;",
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    "\t": "&#x9;",
    "\n": "&#xA;",
    "\r": "&#xD;",
}


def _in_xml_range(char: str) -> bool:
    code = ord(char)
    return (
        code in (0x09, 0x0A, 0x0D)
        or 0x20 <= code <= 0xD7FF
        or 0xE000 <= code <= 0xFFFD
        or 0x10000 <= code <= 0x10FFFF
    )


def _xml_escape(text: str) -> str:
    return "".join(
        _XML_ESCAPES.get(char, char if _in_xml_range(char) else "\ufffd")
        for char in text
    )


@dataclass
class _Element:
    tag: str
    attrs: list[tuple[str, str]] = field(default_factory=list)
    children: list[_Element] = field(default_factory=list)
    text: str = ""


def _render_xml(element: _Element, depth: int, lines: list[str]) -> None:
    pad = _XML_PREFIX + _XML_INDENT * depth
    attrs = "".join(f' {key}="{_xml_escape(value)}"' for key, value in element.attrs)
    opening = f"<{element.tag}{attrs}>"
    closing = f"</{element.tag}>"
    if element.children:
        lines.append(pad + opening)
        for child in element.children:
            _render_xml(child, depth + 1, lines)
        lines.append(pad + closing)
    else:
        lines.append(pad + opening + _xml_escape(element.text) + closing)


def _properties_elements(properties: list[Property] | None) -> list[_Element]:
    if properties is None:
        return []
    return [
        _Element(
            "properties",
            children=[
                _Element("property", [("name", p.name), ("value", p.value)])
                for p in properties
            ],
        )
    ]


def _failure_elements(failure: Failure | None) -> list[_Element]:
    if failure is None:
        return []
    return [
        _Element(
            "failure",
            [("message", failure.message), ("type", failure.type)],
            text=failure.text,
        )
    ]


def _testcase_element(case: Testcase) -> _Element:
    return _Element(
        "testcase",
        [
            ("classname", case.classname),
            ("name", case.name),
            ("timestamp", _format_time(case.timestamp)),
            ("time", case.time),
            ("assertions", str(case.assertions)),
        ],
        children=_failure_elements(case.failure),
    )


def _testsuite_element(suite: Testsuite) -> _Element:
    return _Element(
        "testsuite",
        [
            ("tests", str(suite.tests)),
            ("failures", str(suite.failures)),
            ("timestamp", _format_time(suite.timestamp)),
            ("time", suite.time),
            ("name", suite.name),
        ],
        children=_properties_elements(suite.properties)
        + [_testcase_element(case) for case in suite.testcases],
    )


def _testsuites_element(suites: Testsuites) -> _Element:
    return _Element(
        "testsuites",
        [
            ("name", suites.name),
            ("tests", str(suites.tests)),
            ("failures", str(suites.failures)),
            ("time", suites.time),
        ],
        children=_properties_elements(suites.properties)
        + [_testsuite_element(suite) for suite in suites.testsuites]
        + _failure_elements(suites.failure),
    )


# --- JSON rendering ------------------------------------------------------

_JSON_ESCAPES = (
    ("<", "\\u003c"),
    (">", "\\u003e"),
    ("&", "\\u0026"),
    ("\u2028", "\\u2028"),
    ("\u2029", "\\u2029"),
)


def _properties_json(properties: list[Property]) -> dict[str, Any]:
    if not properties:
        return {}
    return {"property": [{"name": p.name, "value": p.value} for p in properties]}


def _failure_json(failure: Failure) -> dict[str, Any]:
    data: dict[str, Any] = {}
    if failure.text:
        data["text"] = failure.text
    data["message"] = failure.message
    if failure.type:
        data["type"] = failure.type
    return data


def _testcase_json(case: Testcase) -> dict[str, Any]:
    data: dict[str, Any] = {
        "classname": case.classname,
        "name": case.name,
        "timestamp": _format_time(case.timestamp),
        "time": case.time,
    }
    if case.assertions:
        data["assertions"] = case.assertions
    if case.failure is not None:
        data["failure"] = _failure_json(case.failure)
    return data


def _testsuite_json(suite: Testsuite) -> dict[str, Any]:
    data: dict[str, Any] = {
        "tests": suite.tests,
        "failures": suite.failures,
        "timestamp": _format_time(suite.timestamp),
        "time": suite.time,
        "name": suite.name,
    }
    if suite.properties is not None:
        data["properties"] = _properties_json(suite.properties)
    if suite.testcases:
        data["testcase"] = [_testcase_json(case) for case in suite.testcases]
    return data


def _testsuites_json(suites: Testsuites) -> dict[str, Any]:
    data: dict[str, Any] = {
        "name": suites.name,
        "tests": suites.tests,
        "failures": suites.failures,
        "time": suites.time,
    }
    if suites.properties is not None:
        data["properties"] = _properties_json(suites.properties)
    if suites.testsuites:
        data["testsuite"] = [_testsuite_json(suite) for suite in suites.testsuites]
    if suites.failure is not None:
        data["failure"] = _failure_json(suites.failure)
    return data