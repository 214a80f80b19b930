"""Log collectors that run after a failed assertion."""

from __future__ import annotations

from dataclasses import dataclass

_POD = "pod"
_EVENTS = "events"
_COMMAND = "command"


@dataclass
class Command:
    """A command to run as part of a test step or suite."""

    command: str = ""
    namespaced: bool = False
    script: str = ""
    ignore_failure: bool = False
    background: bool = False
    timeout: int = 0
    skip_log_output: bool = False


@dataclass
class TestCollector:
    """A pod-log, events or command collector.

    The type defaults to "command" when a command is given, else "pod".
    """

    __test__ = False

    type: str = ""
    pod: str = ""
    namespace: str = ""
    container: str = ""
    selector: str = ""
    tail: int = 0
    cmd: str = ""

    def validate(self) -> None:
        """Normalise the type and check the fields; raise ValueError if invalid."""
        if not self.type:
            self.type = _COMMAND if self.cmd else _POD
        self.type = self.type.lower()

        if self.type == _COMMAND:
            if not self.cmd:
                raise ValueError("command collector requires a command")
            if self.pod or self.namespace or self.container or self.selector:
                raise ValueError(
                    "command collectors can NOT have pod, namespace, container or selectors"
                )
        elif self.type == _POD:
            if self.cmd:
                raise ValueError("pod collector can NOT have a command")
            if not self.pod and not self.selector:
                raise ValueError("pod collector requires a pod or selector")
        elif self.type == _EVENTS:
            if self.cmd or self.selector or self.container:
                raise ValueError(
                    "event collector can not have a selector, container or command"
                )
        else:
            raise ValueError(f'collector type "{self.type}" unknown')

    def command(self) -> Command | None:
        """Return the command that performs the collection, or None if invalid."""
        try:
            self.validate()
        except ValueError:
            return None
        if self.type == _POD:
            return self.pod_command()
        if self.type == _COMMAND:
            return Command(command=self.cmd, ignore_failure=True)
        if self.type == _EVENTS:
            return self.event_command()
        return None

    def _namespace_or_default(self) -> str:
        return self.namespace or "$NAMESPACE"

    def event_command(self) -> Command:
        """Return the kubectl command that lists events."""
        parts = ["kubectl get events"]
        if self.pod:
            parts.append(self.pod)
        parts.append(f"-n {self._namespace_or_default()}")
        return Command(command=" ".join(parts), ignore_failure=True)

    def pod_command(self) -> Command:
        """Return the kubectl command that fetches pod logs.

        A zero tail becomes 10 with a selector and -1 (everything) otherwise.
        """
        parts = ["kubectl logs --prefix"]
        if self.pod:
            parts.append(self.pod)
        if self.selector:
            parts.append(f"-l {self.selector}")
        parts.append(f"-n {self._namespace_or_default()}")
        if self.container:
            parts.append(f"-c {self.container}")
        else:
            parts.append("--all-containers")
        if self.tail == 0:
            self.tail = 10 if self.selector else -1
        parts.append(f"--tail={self.tail}")
        return Command(command=" ".join(parts), ignore_failure=True)

    def __str__(self) -> str:
        try:
            self.validate()
        except ValueError as error:
            return f"[collector invalid: {error}]"

        details = [f"type=={self.type}"]
        if self.pod:
            details.append(f"pod=={self.pod}")
        if self.selector:
            details.append(f"label: {self.selector}")
        if self.namespace:
            details.append(f"namespace: {self.namespace}")
        if self.container:
            details.append(f"container: {self.container}")
        if self.cmd:
            details.append(f"command: {self.cmd}")
        return "[" + ",".join(details) + "]"