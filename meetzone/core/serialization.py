from __future__ import annotations

from meetzone.core.models import LineOutcome


def to_outcome_payload(outcome: LineOutcome) -> dict:
    if outcome.converted is not None:
        return {
            "input": outcome.line,
            "ok": True,
            "output": outcome.converted.render(),
        }

    error = outcome.error
    return {
        "input": outcome.line,
        "ok": False,
        "error": {
            "kind": error.kind if error is not None else "unknown",
            "message": str(error) if error is not None else "",
        },
    }
