"""Fan-out output"""

from typing import Any, Iterable, List

from hierlog.outputs.base_output import BaseOutput


class TeeOutput(BaseOutput):
    """Write every message to several outputs in order."""

    def __init__(self, outputs: Iterable[Any]):
        """
        Initialize tee output.

        Args:
            outputs: Objects with a write(message) method
        """
        self._outputs: List[Any] = list(outputs)
        if not self._outputs:
            raise ValueError("TeeOutput needs at least one output")

    @property
    def outputs(self) -> List[Any]:
        return list(self._outputs)

    def add_output(self, output: Any) -> None:
        self._outputs.append(output)

    def write(self, message: str) -> None:
        for output in self._outputs:
            output.write(message)

    def flush(self) -> None:
        for output in self._outputs:
            if hasattr(output, "flush"):
                output.flush()

    def close(self) -> None:
        for output in self._outputs:
            if hasattr(output, "close"):
                output.close()

    def __repr__(self) -> str:
        return f"TeeOutput({self._outputs!r})"
