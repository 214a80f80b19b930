import pytest

from kuttl.collector import Command, TestCollector


@pytest.mark.parametrize(
    "fields, contains",
    [
        ({"pod": "foo"}, "type==pod"),
        ({"cmd": "foo"}, "type==command"),
        ({"type": "foo"}, "collector invalid:"),
        ({"type": "pod", "pod": "foo"}, "pod==foo"),
        ({"type": "pod"}, "collector invalid:"),
        ({"type": "pod", "cmd": "foo"}, "collector invalid:"),
        ({"type": "events"}, "type==events"),
        ({"type": "events", "container": "foo"}, "collector invalid:"),
        ({"type": "events", "selector": "foo=bar"}, "collector invalid:"),
        ({"type": "events", "cmd": "foo"}, "collector invalid:"),
        ({"type": "command", "cmd": "foo"}, "command: foo"),
        ({"type": "command"}, "collector invalid:"),
        ({"type": "command", "namespace": "foo"}, "collector invalid:"),
        ({"type": "command", "container": "foo"}, "collector invalid:"),
        ({"type": "command", "pod": "foo"}, "collector invalid:"),
    ],
)
def test_string_contains(fields, contains):
    assert contains in str(TestCollector(**fields))


def test_string_full_details():
    collector = TestCollector(pod="p", selector="a=b", namespace="ns", container="c")
    assert str(collector) == "[type==pod,pod==p,label: a=b,namespace: ns,container: c]"


@pytest.mark.parametrize(
    "collector, expected",
    [
        (
            TestCollector(type="pod", selector="x=y"),
            "kubectl logs --prefix -l x=y -n $NAMESPACE --all-containers --tail=10",
        ),
        (
            TestCollector(type="pod", pod="foo"),
            "kubectl logs --prefix foo -n $NAMESPACE --all-containers --tail=-1",
        ),
        (
            TestCollector(type="pod", selector="x=y", tail=42),
            "kubectl logs --prefix -l x=y -n $NAMESPACE --all-containers --tail=42",
        ),
        (
            TestCollector(type="pod", pod="foo", tail=42),
            "kubectl logs --prefix foo -n $NAMESPACE --all-containers --tail=42",
        ),
    ],
)
def test_pod_command(collector, expected):
    assert collector.pod_command().command == expected


def test_pod_command_with_namespace_and_container():
    collector = TestCollector(pod="foo", namespace="ns", container="app")
    assert collector.pod_command().command == "kubectl logs --prefix foo -n ns -c app --tail=-1"


def test_event_command_defaults():
    command = TestCollector(type="events").command()
    assert command == Command(command="kubectl get events -n $NAMESPACE", ignore_failure=True)


def test_event_command_with_pod_and_namespace():
    command = TestCollector(type="EVENTS", pod="foo", namespace="ns").command()
    assert command.command == "kubectl get events foo -n ns"


def test_command_type_command():
    assert TestCollector(cmd="echo hi").command() == Command(command="echo hi", ignore_failure=True)


def test_command_is_none_when_invalid():
    assert TestCollector(type="pod").command() is None


def test_validate_infers_and_lowercases_type():
    collector = TestCollector(type="POD", pod="foo")
    collector.validate()
    assert collector.type == "pod"

    inferred = TestCollector(cmd="ls")
    inferred.validate()
    assert inferred.type == "command"


@pytest.mark.parametrize(
    "collector, message",
    [
        (TestCollector(type="foo"), 'collector type "foo" unknown'),
        (TestCollector(type="command"), "command collector requires a command"),
        (TestCollector(type="pod", cmd="x"), "pod collector can NOT have a command"),
        (TestCollector(type="pod"), "pod collector requires a pod or selector"),
        (
            TestCollector(type="events", selector="a"),
            "event collector can not have a selector, container or command",
        ),
    ],
)
def test_validate_errors(collector, message):
    with pytest.raises(ValueError) as excinfo:
        collector.validate()
    assert str(excinfo.value) == message