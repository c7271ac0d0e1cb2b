"""Errors raised by capability resolution."""

from ..utils.error_format import format_error_message

# (strategy, error) where strategy is "direct" or "fallback"
Attempt = tuple[str, BaseException]


class UnresolvedCapabilityError(ImportError):
    """No strategy could load the requested capability.

    Subclasses ImportError so callers that already guard optional imports
    catch it without changes. ``name`` holds the requested capability and
    ``attempts`` lists every strategy tried with the error it produced.
    """

    def __init__(self, name: object, attempts: list[Attempt] | None = None):
        self.attempts: list[Attempt] = list(attempts or [])
        super().__init__(self._build_message(name, self.attempts), name=name)

    @staticmethod
    def _build_message(name: object, attempts: list[Attempt]) -> str:
        if not isinstance(name, str):
            return f"Capability name must be a string, got {type(name).__name__}: {name!r}"
        if not name:
            return "Capability name must be a non-empty string"

        lines = [f"Capability '{name}' could not be resolved"]
        if attempts:
            lines.append("")
            lines.append("Resolution attempted:")
            for index, (strategy, error) in enumerate(attempts, start=1):
                lines.append(f"  {index}. {strategy}: {format_error_message(error)}")
        return "\n".join(lines)

    def __reduce__(self):
        return (type(self), (self.name, self.attempts))
